'''
Immutable singly-linked lists.

A list is either the empty list (the `Empty` singleton) or a `Node` holding
one value and the rest of the list. Nodes never change after construction,
so any tail may be shared between lists.
'''
from overrides import overrides

class EmptyListError(Exception):
    pass

class ImmutableList(object):
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __bool__(self):
        raise NotImplementedError(f"no variant supplied for {type(self).__name__}!")

    def __iter__(self):
        ls = self
        while ls:
            yield ls.value
            ls = ls.rest

    def __len__(self):
        count = 0
        for _ in self:
            count += 1
        return count

    def __eq__(self, other):
        if not isinstance(other, ImmutableList):
            return NotImplemented
        a, b = self, other
        while a and b:
            if a is b:
                return True
            if a.value != b.value:
                return False
            a, b = a.rest, b.rest
        return not a and not b

    def __hash__(self):
        return hash(tuple(self))

    def __repr__(self):
        return f"of({', '.join(repr(value) for value in self)})"

class EmptyList(ImmutableList):
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @overrides
    def __bool__(self):
        return False

    @overrides
    def __iter__(self):
        return iter(())

class Node(ImmutableList):
    __slots__ = ('value', 'rest')
    __match_args__ = ('value', 'rest')

    def __init__(self, value, rest):
        if not isinstance(rest, ImmutableList):
            raise TypeError(f"rest must be an ImmutableList, not {type(rest).__name__}")
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'rest', rest)

    @overrides
    def __bool__(self):
        return True

Empty = EmptyList()

def cons(item, rest):
    return Node(item, rest)

def car(ls):
    if not ls:
        raise EmptyListError('Null list')
    return ls.value

def cdr(ls):
    if not ls:
        raise EmptyListError('Null list')
    return ls.rest

def flatten(ls):
    return tuple(ls)

def unflatten(flat_list):
    ls = Empty
    for elem in reversed(tuple(flat_list)):
        ls = Node(elem, ls)
    return ls

def of(*elements):
    return unflatten(elements)
