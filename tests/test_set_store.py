import pytest

from nutsdb.ds.set_store import (
    ItemEmptyError,
    Set,
    SetError,
    SetKeyNotExistError,
    SetKeyNotFoundError,
)


def test_sadd():
    my_set = Set()
    key = "mySet0"
    my_set.sadd(key, b"Hello")
    my_set.sadd(key, b"World")
    my_set.sadd(key, b"hello1", b"hello2")
    assert my_set.sare_members(key, b"Hello", b"World", b"hello1", b"hello2") is True
    assert my_set.scard(key) == 4


@pytest.fixture
def diff_set():
    my_set = Set()
    for item in (b"a", b"b", b"c"):
        my_set.sadd("mySet1", item)
    for item in (b"d", b"c", b"e"):
        my_set.sadd("mySet2", item)
    for item in (b"a", b"b", b"c"):
        my_set.sadd("mySet3", item)
    for item in (b"a", b"b", b"c", b"d", b"e", b"f"):
        my_set.sadd("mySet4", item)
    my_set.sadd("mySet5", b"b")
    return my_set


@pytest.mark.parametrize(
    "key1, key2, expected",
    [
        ("mySet1", "mySet2", [b"a", b"b"]),
        ("mySet1", "mySet3", []),
        ("mySet4", "mySet5", [b"a", b"c", b"d", b"e", b"f"]),
    ],
)
def test_sdiff(diff_set, key1, key2, expected):
    assert sorted(diff_set.sdiff(key1, key2)) == expected


@pytest.mark.parametrize(
    "key1, key2",
    [("fake_key1", "mySet2"), ("mySet1", "fake_key2"), ("fake_key1", "fake_key2")],
)
def test_sdiff_missing_sets(diff_set, key1, key2):
    with pytest.raises(SetError):
        diff_set.sdiff(key1, key2)


def test_sdiff_error_messages(diff_set):
    with pytest.raises(SetError, match="set1 is not exists"):
        diff_set.sdiff("fake_key1", "mySet2")
    with pytest.raises(SetError, match="set2 is not exists"):
        diff_set.sdiff("mySet1", "fake_key2")


def test_scard():
    my_set = Set()
    for item in (b"1", b"2", b"3"):
        my_set.sadd("mySet1", item)
    for item in (b"1", b"2", b"3", b"4", b"5", b"6"):
        my_set.sadd("mySet2", item)
    my_set.sadd("mySet3", b"1")
    assert my_set.scard("mySet1") == 3
    assert my_set.scard("mySet2") == 6
    assert my_set.scard("mySet3") == 1
    assert my_set.scard("key_fake") == 0


@pytest.fixture
def inter_set():
    my_set = Set()
    for item in (b"a", b"b", b"c"):
        my_set.sadd("mySet5", item)
    for item in (b"d", b"c", b"e"):
        my_set.sadd("mySet6", item)
    return my_set


def test_sinter(inter_set):
    assert inter_set.sinter("mySet5", "mySet6") == [b"c"]


@pytest.mark.parametrize(
    "key1, key2",
    [("fake_key1", "mySet6"), ("mySet5", "fake_key2"), ("fake_key1", "fake_key2")],
)
def test_sinter_missing_sets(inter_set, key1, key2):
    with pytest.raises(SetError):
        inter_set.sinter(key1, key2)


def test_smembers():
    my_set = Set()
    my_set.sadd("mySet8", b"v-1")
    my_set.sadd("mySet8", b"v-2")
    members = my_set.smembers("mySet8")
    assert b"v-2" in members
    assert sorted(members) == [b"v-1", b"v-2"]
    with pytest.raises(SetError, match="set not exists"):
        my_set.smembers("fake_key")


def test_smove():
    my_set = Set()
    my_set.sadd("mySet9", b"a")
    my_set.sadd("mySet9", b"b")
    my_set.sadd("mySet10", b"c")

    assert my_set.smove("mySet9", "mySet10", b"b") is True
    assert sorted(my_set.smembers("mySet9")) == [b"a"]
    assert sorted(my_set.smembers("mySet10")) == [b"b", b"c"]

    with pytest.raises(SetError, match="key1 is not exists"):
        my_set.smove("fake_key1", "mySet10", b"b")
    with pytest.raises(SetError, match="key2 is not exists"):
        my_set.smove("mySet9", "fake_key2", b"b")
    assert sorted(my_set.smembers("mySet9")) == [b"a"]


def test_spop():
    my_set = Set()
    my_set.sadd("mySet10", b"a")
    members = my_set.smembers("mySet10")
    assert my_set.spop("mySet10") in members
    assert my_set.spop("mySet10") is None
    assert my_set.spop("fake") is None
    assert my_set.scard("mySet10") == 0


def test_srem():
    my_set = Set()
    key = "mySet11"
    for item in (b"a", b"b", b"c"):
        my_set.sadd(key, item)
    my_set.srem(key, b"a")
    my_set.srem(key, b"b")
    my_set.srem(key, b"c")
    my_set.srem(key, bytes(4))
    assert my_set.scard(key) == 0
    with pytest.raises(SetKeyNotFoundError):
        my_set.srem("key_fake", b"b")
    with pytest.raises(ItemEmptyError):
        my_set.srem(key, None)
    with pytest.raises(ItemEmptyError):
        my_set.srem(key)


@pytest.mark.parametrize(
    "key, value, expected",
    [("key1", b"a", True), ("key1", b"b", False), ("key2", b"a", False)],
)
def test_sis_member(key, value, expected):
    my_set = Set()
    my_set.sadd("key1", b"a")
    assert my_set.sis_member(key, value) is expected


def test_sare_members():
    my_set = Set()
    my_set.sadd("key1", b"a")
    assert my_set.sare_members("key1", b"a") is True
    with pytest.raises(SetError, match="item not exits"):
        my_set.sare_members("key1", b"b")
    with pytest.raises(SetKeyNotExistError):
        my_set.sare_members("key2", b"a")


def test_shas_key():
    my_set = Set()
    my_set.sadd("key1", b"a")
    assert my_set.shas_key("key1") is True
    assert my_set.shas_key("key2") is False


def test_sunion():
    my_set = Set()
    for item in (b"a", b"b", b"c"):
        my_set.sadd("key1", item)
    for item in (b"a", b"d", b"e"):
        my_set.sadd("key2", item)
    union = my_set.sunion("key1", "key2")
    assert sorted(union) == [b"a", b"b", b"c", b"d", b"e"]
    assert len(union) == 5
    with pytest.raises(SetError):
        my_set.sunion("key1", "key3")