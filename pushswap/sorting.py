"""Sorting strategies that drive a :class:`Machine` until stack a is sorted."""

from __future__ import annotations

from pushswap.parsing import Mode
from pushswap.stacks import Machine, compute_disorder, index_stack, is_sorted


def _min_position(machine: Machine) -> int:
    """Position in a of the first smallest value."""
    return min(enumerate(machine.a), key=lambda pair: pair[1].data)[0]


def _bring_to_top(machine: Machine, position: int) -> None:
    """Rotate a the shorter way so that the element at *position* is on top."""
    size = len(machine.a)
    if position <= size // 2:
        for _ in range(position):
            machine.ra()
    else:
        for _ in range(size - position):
            machine.rra()


def sort_3(machine: Machine) -> None:
    """Sort the top three elements of a with at most two operations."""
    a = machine.a
    if len(a) < 3:
        raise ValueError("sort_3 needs at least three elements")
    largest = max(a[0].data, a[1].data, a[2].data)
    if a[0].data == largest:
        machine.ra()
    elif a[1].data == largest:
        machine.rra()
    if a[0].data > a[1].data:
        machine.sa()


def sort_5(machine: Machine) -> None:
    """Sort four or five elements by parking the smallest ones on b."""
    remaining = len(machine.a)
    while remaining > 3:
        _bring_to_top(machine, _min_position(machine))
        machine.pb()
        remaining -= 1
    sort_3(machine)
    while machine.b:
        machine.pa()
    if machine.a[0].data > machine.a[1].data:
        machine.sa()


def simple_min_extract(machine: Machine) -> None:
    """Repeatedly move the minimum to b, sort the last three, then bring all back."""
    a = machine.a
    if not a:
        return
    if len(a) <= 3:
        if not is_sorted(a):
            sort_3(machine)
        return
    while len(a) > 3:
        _bring_to_top(machine, _min_position(machine))
        machine.pb()
    if not is_sorted(a):
        sort_3(machine)
    while machine.b:
        machine.pa()


def _push_back_to_a(machine: Machine) -> None:
    b = machine.b
    while b:
        largest = max(node.index for node in b)
        position = next(i for i, node in enumerate(b) if node.index == largest)
        rotate = machine.rb if position <= len(b) // 2 else machine.rrb
        while b[0].index != largest:
            rotate()
        machine.pa()


def chunk_sort(machine: Machine) -> None:
    """Push a to b in rank chunks, then pull the largest back one at a time."""
    a, b = machine.a, machine.b
    if is_sorted(a):
        return
    index_stack(a)
    size = len(a)
    chunks = 5 if size <= 100 else 11
    step = size // chunks
    if step == 0:
        raise ValueError(f"chunk_sort needs at least {chunks} elements")
    limit = step
    while a:
        if a[0].index < limit:
            machine.pb()
            if b[0].index < limit - step // 2:
                machine.rb()
        else:
            machine.ra()
        if len(b) == limit:
            limit += step
    _push_back_to_a(machine)


def radix_sort(machine: Machine) -> None:
    """Binary LSD radix sort on the node ranks, using b as the zero bucket."""
    a = machine.a
    size = len(a)
    bits = max((node.index for node in a), default=0)
    bits = max(bits, 0).bit_length()
    for bit in range(bits):
        for _ in range(size):
            if (a[0].index >> bit) & 1:
                machine.ra()
            else:
                machine.pb()
        while machine.b:
            machine.pa()


def adaptive_sort(machine: Machine) -> None:
    """Pick a strategy from how disordered stack a is."""
    disorder = compute_disorder(machine.a)
    if disorder < 0.2:
        simple_min_extract(machine)
    elif disorder < 0.5:
        chunk_sort(machine)
    else:
        radix_sort(machine)


_STRATEGIES = {
    Mode.SIMPLE: simple_min_extract,
    Mode.MEDIUM: chunk_sort,
    Mode.COMPLEX: radix_sort,
    Mode.ADAPTIVE: adaptive_sort,
}


def sort(machine: Machine, mode: Mode = Mode.ADAPTIVE) -> None:
    """Sort stack a, using special cases for up to five elements."""
    a = machine.a
    size = len(a)
    if size <= 1 or is_sorted(a):
        return
    if size == 2:
        if a[0].data > a[1].data:
            machine.sa()
        return
    if size == 3:
        sort_3(machine)
    elif size <= 5:
        sort_5(machine)
    else:
        _STRATEGIES.get(mode, adaptive_sort)(machine)