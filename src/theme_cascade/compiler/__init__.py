from theme_cascade.compiler.compiler import compile_override, compile_overrides, compile_theme

__all__ = ["compile_override", "compile_overrides", "compile_theme"]
