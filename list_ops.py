'''
Operations over immutable linked lists.

Every operation is pure and returns a new list (or a scalar), sharing tails
with its inputs where it can. The recursive definitions are evaluated with
loops so that long lists never hit the interpreter's recursion limit; the
order in which `f` or `+`/`*` is applied is the same as in the recursive
form.

`tail`, `drop` and `init` are total: on the empty list they return the
empty list instead of raising. Use `linked_list.car`/`cdr` for the partial
versions.
'''
import logging
import operator

from linked_list import Empty, Node

log = logging.getLogger(__name__)

def _rebuild(values, rest=Empty):
    # values are consumed back to front so rest ends up last
    for value in reversed(values):
        rest = Node(value, rest)
    return rest

def fold_right(ls, z, f):
    '''
    f(x1, f(x2, ... f(xn, z))). f is applied to the rightmost element first.
    '''
    acc = z
    for value in reversed(tuple(ls)):
        acc = f(value, acc)
    return acc

def fold_left(ls, z, f):
    '''
    f(...f(f(z, x1), x2)..., xn). f is applied to the leftmost element first.
    '''
    acc = z
    while ls:
        acc = f(acc, ls.value)
        ls = ls.rest
    return acc

def sum_list(ints):
    return fold_right(ints, 0, operator.add)

def product(ds):
    '''
    Right-associated product. The first element equal to 0.0 stands in for
    the product of everything from there on, which is never looked at. The
    elements before it are still multiplied onto it.
    '''
    seen = []
    result = 1.0
    while ds:
        if ds.value == 0.0:
            log.debug('product short-circuited after %d elements', len(seen))
            result = 0.0
            break
        seen.append(ds.value)
        ds = ds.rest
    for value in reversed(seen):
        result = value * result
    return result

def sum_folded(ns):
    return fold_right(ns, 0, lambda x, y: x + y)

def product_folded(ns):
    return fold_right(ns, 1.0, lambda x, y: x * y)

def append(a1, a2):
    '''
    All of a1 followed by all of a2. a1 is copied, a2 is shared as is.
    '''
    return _rebuild(tuple(a1), a2)

def tail(ls):
    if not ls:
        log.debug('tail of empty list')
        return Empty
    return ls.rest

def set_head(ls, h):
    '''
    Prepends h: the old head is kept as the second element.
    '''
    return Node(h, ls)

def drop(ls, n):
    i = 0
    while i < n:
        if not ls:
            log.debug('drop ran past the end after %d of %d elements', i, n)
            return Empty
        ls = tail(ls)
        i += 1
    return ls

def drop_while(ls, f):
    while ls and f(ls.value):
        ls = ls.rest
    return ls

def init(ls):
    if not ls:
        log.debug('init of empty list')
        return Empty
    values = []
    while ls.rest:
        values.append(ls.value)
        ls = ls.rest
    return _rebuild(values)

def length(ls):
    return fold_right(ls, 0, lambda _, acc: 1 + acc)

def length_direct(ls):
    count = 0
    while ls:
        count += 1
        ls = ls.rest
    return count

def map_list(ls, f):
    return _rebuild([f(value) for value in ls])
