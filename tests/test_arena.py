import pytest

from zlisp.arena import Allocator, Arena


def test_allocate_returns_block_of_requested_size():
    arena = Arena(16)
    block = arena.allocate(4)
    assert len(block) == 4
    assert arena.used == 4


def test_blocks_do_not_overlap():
    arena = Arena(16)
    first = arena.allocate(3)
    second = arena.allocate(3)
    first[:] = b"aaa"
    second[:] = b"bbb"
    assert bytes(first) == b"aaa"
    assert bytes(second) == b"bbb"


def test_allocation_cannot_fill_to_capacity():
    arena = Arena(8)
    with pytest.raises(MemoryError):
        arena.allocate(8)
    assert arena.used == 0


def test_exhaustion_after_several_allocations():
    arena = Arena(10)
    arena.allocate(5)
    arena.allocate(4)
    with pytest.raises(MemoryError):
        arena.allocate(1)


def test_zero_capacity_arena_fails():
    with pytest.raises(MemoryError):
        Arena(0).allocate(0)


def test_negative_sizes_rejected():
    with pytest.raises(ValueError):
        Arena(-1)
    with pytest.raises(ValueError):
        Arena(4).allocate(-1)


def test_destroy_prevents_allocation():
    arena = Arena(16)
    arena.allocate(2)
    arena.destroy()
    assert arena.capacity == 0
    assert arena.used == 0
    with pytest.raises(MemoryError):
        arena.allocate(1)


def test_context_manager_destroys():
    with Arena(16) as arena:
        assert len(arena.allocate(2)) == 2
    with pytest.raises(MemoryError):
        arena.allocate(1)


def test_allocator_dispatches_to_callbacks():
    freed = []
    alloc = Allocator(
        allocator=lambda state, cap: bytearray(cap),
        deallocator=lambda state, data: freed.append(data),
        reallocator=lambda state, data, cap: data + bytearray(cap - len(data)),
        state=None,
    )
    data = alloc.allocator(alloc.state, 4)
    grown = alloc.reallocator(alloc.state, data, 9)
    alloc.deallocator(alloc.state, grown)
    assert len(data) == 4
    assert len(grown) == 9
    assert freed == [grown]
    assert alloc.init is None and alloc.destroy is None