from fzfcore.cache import ChunkCache
from fzfcore.chunklist import Chunk
from fzfcore.constants import CHUNK_SIZE, QUERY_CACHE_MAX
from fzfcore.item import Item


def _full_chunk():
    return Chunk([Item(text=str(i), index=i) for i in range(CHUNK_SIZE)])


def test_chunk_cache_cases():
    cache = ChunkCache()
    chunk1 = Chunk()
    chunk2 = _full_chunk()
    items1 = [object()]
    items2 = [object(), object()]
    cache.add(chunk1, "foo", items1)
    cache.add(chunk2, "foo", items1)
    cache.add(chunk2, "bar", items2)

    assert cache.lookup(chunk1, "foo") is None
    cached = cache.lookup(chunk2, "foo")
    assert cached is not None and len(cached) == 1
    cached = cache.lookup(chunk2, "bar")
    assert cached is not None and len(cached) == 2
    assert cache.lookup(chunk1, "foobar") is None


def test_empty_key_is_not_cached():
    cache = ChunkCache()
    chunk = _full_chunk()
    cache.add(chunk, "", [object()])
    assert cache.lookup(chunk, "") is None


def test_large_result_lists_are_not_cached():
    cache = ChunkCache()
    chunk = _full_chunk()
    cache.add(chunk, "foo", [object()] * (QUERY_CACHE_MAX + 1))
    assert cache.lookup(chunk, "foo") is None
    cache.add(chunk, "foo", [object()] * QUERY_CACHE_MAX)
    assert len(cache.lookup(chunk, "foo")) == QUERY_CACHE_MAX


def test_search_finds_prefix_and_suffix():
    cache = ChunkCache()
    chunk = _full_chunk()
    prefix_results = [object()]
    suffix_results = [object(), object()]
    cache.add(chunk, "foo", prefix_results)
    cache.add(chunk, "baz", suffix_results)
    assert cache.search(chunk, "foobar") is prefix_results
    assert cache.search(chunk, "barbaz") is suffix_results
    assert cache.search(chunk, "qux") is None
    assert cache.search(chunk, "") is None


def test_search_on_unknown_or_partial_chunk():
    cache = ChunkCache()
    assert cache.search(_full_chunk(), "foobar") is None
    assert cache.search(Chunk(), "foobar") is None


def test_retire_and_clear():
    cache = ChunkCache()
    chunk_a = _full_chunk()
    chunk_b = _full_chunk()
    cache.add(chunk_a, "foo", [object()])
    cache.add(chunk_b, "foo", [object()])
    cache.retire(chunk_a)
    assert cache.lookup(chunk_a, "foo") is None
    assert cache.lookup(chunk_b, "foo") is not None and len(cache.lookup(chunk_b, "foo")) == 1
    cache.clear()
    assert cache.lookup(chunk_b, "foo") is None