from typing import List, Dict, Any, Callable, Optional
import typing
import inspect
from dataclasses import dataclass, field

from harmony.debug import trace


class Surface:
    """
    A named namespace that backported operations are installed onto,
    standing in for a built-in like `String` or `String.prototype`.
    """

    def __init__(self, name: str):
        self.__name = name

    @property
    def surface_name(self) -> str:
        return self.__name

    def members(self) -> List[str]:
        return [name for name in vars(self) if not name.startswith('_')]

    def __repr__(self) -> str:
        return f"Surface({self.__name!r}, members={self.members()!r})"


def define(target: Any, name: str, value: Any) -> bool:
    """
    Install `value` as `target.<name>` unless the target already exposes that
    name, own or inherited. An existing member is never overwritten.

    Returns True if the value was installed.
    """
    if hasattr(target, name):
        trace(f"define {name!r}: already present on {target!r}, skipped")
        return False
    setattr(target, name, value)
    trace(f"define {name!r}: installed")
    return True


@dataclass
class FunctionSignature:
    arg_names: List[str]
    arg_types: Dict[str, Any]
    return_type: Any

    def __str__(self):
        def format_type(t: Any):
            if t == Any:
                return 'Any'
            if t is type(None):
                return 'None'
            # if t has type arguments
            if hasattr(t, '__args__'):
                origin = getattr(t, '__origin__', None)
                if origin is None or origin is typing.Union:
                    return ' | '.join(format_type(arg) for arg in t.__args__)
                return f"{origin.__name__}[{', '.join([format_type(arg) for arg in t.__args__])}]"
            return getattr(t, '__name__', str(t))

        args_str = ", ".join([f"{name}: {format_type(self.arg_types[name])}" for name in self.arg_names])
        return_str = format_type(self.return_type)
        return f"({args_str}) -> {return_str}"

    @staticmethod
    def of(f: Callable) -> 'FunctionSignature':
        sig = inspect.signature(f)
        arg_names = list(sig.parameters.keys())
        type_hints = typing.get_type_hints(f)

        arg_types = {name: type_hints.get(name, Any) for name in arg_names}
        return_type = type_hints.get('return', Any)
        return FunctionSignature(arg_names, arg_types, return_type)


@dataclass
class Registry:
    surfaces: Dict[str, Surface] = field(default_factory=dict)
    signatures: Dict[str, FunctionSignature] = field(default_factory=dict)

    def surface(self, name: str) -> Surface:
        if name not in self.surfaces:
            self.surfaces[name] = Surface(name)
        return self.surfaces[name]

    def register(self, func: Callable | None = None, name: Optional[str] = None, on: str = 'global') -> Callable:
        """
        Record `func` under `<on>.<name>` and install it on that surface if the
        name is still free. The function itself is returned unchanged.
        """
        name_override = name
        def decorator(f):
            name = name_override or f.__name__
            if define(self.surface(on), name, f) and inspect.isfunction(f):
                self.signatures[f"{on}.{name}"] = FunctionSignature.of(f)
            return f

        if func is None:
            return decorator
        else:
            return decorator(func)

    def lookup(self, qualified_name: str) -> Any:
        surface_name, _, name = qualified_name.rpartition('.')
        if surface_name not in self.surfaces:
            raise AttributeError(f"No surface named '{surface_name}'")
        return getattr(self.surfaces[surface_name], name)

    def get_function_signature(self, qualified_name: str) -> str:
        if qualified_name not in self.signatures:
            return f"Function '{qualified_name}' not found"

        return str(self.signatures[qualified_name])

    def install(self, target: Any, surface_name: str) -> List[str]:
        """
        Bind every operation of a surface onto `target` (a module, class or
        object), skipping each name the target already has.

        Returns the names that were installed.
        """
        surface = self.surface(surface_name)
        static = inspect.isclass(target) and not surface_name.endswith('.prototype')

        installed = []
        for name in surface.members():
            value = getattr(surface, name)
            if static and inspect.isfunction(value):
                value = staticmethod(value)
            if define(target, name, value):
                installed.append(name)
        return installed


builtins = Registry()
