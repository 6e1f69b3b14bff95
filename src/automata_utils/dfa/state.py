from functools import total_ordering


@total_ordering
class State:
    __slots__ = ("_name",)

    def __init__(self, name):
        self._name = str(name)

    @property
    def name(self) -> str:
        return self._name

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, State):
            return False
        return self._name == value._name

    def __lt__(self, value: object) -> bool:
        if not isinstance(value, State):
            return NotImplemented
        return self._name < value._name

    def __hash__(self) -> int:
        return hash(("state", self._name))

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"State({self._name!r})"


@total_ordering
class Symbol:
    __slots__ = ("_value",)

    def __init__(self, value):
        self._value = str(value)

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Symbol):
            return False
        return self._value == value._value

    def __lt__(self, value: object) -> bool:
        if not isinstance(value, Symbol):
            return NotImplemented
        return self._value < value._value

    def __hash__(self) -> int:
        return hash(("symbol", self._value))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Symbol({self._value!r})"
