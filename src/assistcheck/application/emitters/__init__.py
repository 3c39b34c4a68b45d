"""Code emitters."""

from assistcheck.application.emitters.python_factory import (
    PythonFactoryEmitter,
    generated_class_name,
)

__all__ = ["PythonFactoryEmitter", "generated_class_name"]
