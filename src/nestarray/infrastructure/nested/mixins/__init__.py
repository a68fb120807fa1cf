"""
Capability-group mixins of `NestedArray`.

Each subpackage declares one abstract mixin in ``_base.py`` and registers its
``BackendKind.NESTED`` implementations in ``_nested_*.py`` modules.
"""
