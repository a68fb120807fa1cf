"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single call to one of
several registered implementations based on a runtime *state* derived from
the receiver (the first positional argument).

Core idea
---------
- You define a *base* callable (its signature becomes the canonical one).
- You then register multiple "control paths" for it, each keyed by:
    (OwnerName, MethodName, StateVal)
- At runtime, the wrapper computes the receiver's state and dispatches to the
  registered implementation that matches it.

Two flavours are supported by the same builder:

- Class methods: ``templator(cls, cls.method, state)`` installs a dispatching
  wrapper on ``cls`` under ``method.__name__``. A missing control path raises
  (see ``trap_exception``).
- Free functions: ``templator.canonical(func)`` wraps a module-level function
  whose own body is the default path, used for every state that has no
  registered implementation. Paths are then registered with
  ``templator(None, func, state)``.

Important notes
---------------
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- Implementations receive the receiver as their first argument, exactly like
  bound instance methods.
- Registering the same key twice replaces the previous implementation.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps
from operator import attrgetter

P = ParamSpec("P")
R = TypeVar("R")

StateResolver = Union[str, Callable[[Any], Hashable]]


def create_path_builder(state_of: StateResolver = "_state") -> Callable[
    [
        Optional[Type],
        Callable[P, R],
        Hashable,
        Optional[Union[Type[Exception], Callable[[Callable[P, R], Any], None]]],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" used to register stateful control paths.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("_state")

        class MyClass:
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, state="A")
        def foo_A(self, x: int) -> int:
            ...

    or, for free functions dispatched on a classifier:

        decorator = create_path_builder(kind_of)

        @decorator.canonical
        def size(value) -> int:
            return 1

        @decorator(None, size, state="list")
        def size_list(value) -> int:
            return len(value)

    Parameters
    ----------
    state_of : Union[str, Callable[[Any], Hashable]], optional
        How to compute the dispatch state from the receiver. A string is
        treated as an attribute name (read with `operator.attrgetter`); a
        callable is invoked with the receiver. Defaults to ``"_state"``.

    Returns
    -------
    Callable
        The templator ``(owner, method, state, trap_exception=None) ->
        decorator``, carrying a ``canonical`` attribute for free functions.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "OwnerName",
            "MethodName",
            "StateVal",
        ],
    )
    """
    Tuple-like key used to uniquely identify a control path.

    Fields
    ------
    OwnerName : str
        The owning class name, or the defining module for free functions.
    MethodName : str
        The base method name being templated.
    StateVal : Hashable
        The state value that selects this implementation.
    """

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (owner, method, state) keys to registered implementations."""

    resolve_state: Callable[[Any], Hashable] = (
        attrgetter(state_of) if isinstance(state_of, str) else state_of
    )
    state_name = state_of if isinstance(state_of, str) else state_of.__name__

    def _owner_name(owner: Optional[Type], method: Callable) -> str:
        if owner is None:
            return method.__module__
        return owner.__name__

    def _current_state(self: Any) -> Hashable:
        try:
            return resolve_state(self)
        except AttributeError:
            raise NotImplementedError(
                "{} is missing attribute {} (@property)".format(
                    type(self), repr(state_name)
                )
            ) from None

    def canonical(method: Callable[P, R]) -> Callable[P, R]:
        """
        Wrap a free function so that registered control paths override its body.

        Parameters
        ----------
        method : Callable[P, R]
            The default implementation. It runs whenever the receiver's state
            has no registered control path.

        Returns
        -------
        Callable[P, R]
            A dispatching wrapper with the metadata of `method`.
        """
        owner_name = _owner_name(None, method)

        @wraps(method)
        def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
            key = MethodKey(owner_name, method.__name__, resolve_state(self))
            if sm := methods_map.get(key):
                return sm(self, *args, **kwargs)
            return method(self, *args, **kwargs)

        return wrapper

    def templator(
        owner: Optional[Type],
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[
            Union[Type[Exception], Callable[[Callable[P, R], Any], None]]
        ] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        owner : Optional[Type]
            The class whose method should be wrapped for state-based dispatch,
            or None when `method` is a free function already wrapped with
            ``canonical``.
        method : Callable[P, R]
            The base method being templated.
        state : Hashable
            The state value that selects the decorated implementation.
        trap_exception : Optional[Union[Type[Exception], Callable[[Callable[P, R], Any], None]]]
            Class methods only. Controls what happens when a dispatch target is
            missing:

            - If `None`, the wrapper raises `NotImplementedError`.
            - If an exception class, the wrapper raises it with a message
              naming the missing state.
            - If any other callable, it is invoked as
              `trap_exception(method, state)` before `NotImplementedError`
              is raised.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator that registers its argument and returns it unchanged.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {repr(state)}"
            ) from None

        owner_name = _owner_name(owner, method)
        smk: MethodKey = MethodKey(owner_name, method.__name__, state)
        """Static method key for the control path being registered by this call."""

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method
            if owner is None:
                return sub_method

            @wraps(method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                cur_state = _current_state(self)
                key = MethodKey(owner_name, method.__name__, cur_state)
                if sm := methods_map.get(key):
                    return sm(self, *args, **kwargs)
                message = "Missing control path (state={}) for {}".format(
                    repr(cur_state), repr(method)
                )
                if isinstance(trap_exception, type):
                    raise trap_exception(message)
                if callable(trap_exception):
                    trap_exception(method, cur_state)
                raise NotImplementedError(message)

            # Keep the original declaration reachable so re-registration on the
            # same owner does not wrap an already-installed wrapper.
            base = getattr(method, "__wrapped__", method)
            wrapper.__wrapped__ = base
            setattr(owner, base.__name__, wrapper)
            return sub_method

        return decorator

    templator.canonical = canonical
    return templator
