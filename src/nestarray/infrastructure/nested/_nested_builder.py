"""
NestedArray control-path manager for backend-specific dispatch.

This module defines the shared control-path manager used to register and
resolve implementations of NestedArray methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"_state"``. Method dispatch is
performed on the runtime value of ``self._state``, which is
``BackendKind.NESTED`` for every NestedArray.

Typical usage
-------------
Implementations register themselves against the mixin that declares the
method:

    @nested_control_path_manager(Mixin, Mixin.op, BackendKind.NESTED)
    def nested_op(self, ...): ...

At runtime, calling ``NestedArray.op(...)`` dispatches to the implementation
registered for ``self._state``.
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches NestedArray methods based on `self._state`
nested_control_path_manager = create_path_builder("_state")
