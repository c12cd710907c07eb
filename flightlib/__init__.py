"""Quadrotor states, commands, quaternion helpers, scene objects and render message types."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "math",
    "command",
    "quad_state",
    "pend_state",
    "static_object",
    "unity_messages",
]