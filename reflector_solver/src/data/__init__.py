from .platform_loader import load_grid, load_steps_text, read_grid, read_steps_text

__all__ = ["read_grid", "load_grid", "read_steps_text", "load_steps_text"]
