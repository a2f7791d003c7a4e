import io

import pytest

from syslab.stringlist import StringProcList, StringProcNode, str_concat


def test_empty_list():
    lst = StringProcList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.first is None and lst.last is None


def test_empty_list_print():
    out = io.StringIO()
    StringProcList().print_to(out)
    assert out.getvalue() == "List length: 0\n"


def test_add_nodes_keeps_order():
    lst = StringProcList()
    for word in ("hola", "a", "todos!"):
        lst.add_node(0, word)
    assert [n.hash for n in lst] == ["hola", "a", "todos!"]
    assert lst.first.hash == "hola"
    assert lst.last.hash == "todos!"
    assert len(lst) == 3


def test_print_format():
    lst = StringProcList()
    lst.add_node(3, "sol")
    lst.add_node(5, "rigel")
    out = io.StringIO()
    lst.print_to(out)
    assert out.getvalue() == (
        "List length: 2\n"
        "\tnode hash: sol | type: 3\n"
        "\tnode hash: rigel | type: 5\n"
    )


def test_concat_all_same_type():
    lst = StringProcList()
    for word in ("hola", "a", "todos!"):
        lst.add_node(0, word)
    assert lst.concat(0, "hash") == "hash" + "hola" + "a" + "todos!"


def test_concat_filters_by_type():
    lst = StringProcList()
    lst.add_node(1, "x")
    lst.add_node(2, "y")
    lst.add_node(1, "z")
    assert lst.concat(1, "h:") == "h:" + "x" + "z"
    assert lst.concat(2, "h:") == "h:" + "y"


def test_concat_no_match_returns_prefix():
    lst = StringProcList()
    lst.add_node(1, "x")
    assert lst.concat(7, "prefix") == "prefix"


def test_concat_does_not_modify_list():
    lst = StringProcList()
    lst.add_node(1, "x")
    lst.concat(1, "p")
    assert [(n.type, n.hash) for n in lst] == [(1, "x")]


def test_concat_parts_cover_every_node():
    lst = StringProcList()
    words = ["geminis", "pisis", "cefeo", "pavo", "libra"]
    for i, w in enumerate(words):
        lst.add_node(i % 3, w)
    total = sum(len(lst.concat(t, "")) for t in range(8))
    assert total == sum(len(w) for w in words)


def test_str_concat():
    assert str_concat("ab", "cd") == "abcd"
    assert str_concat("", "x") == "x"


@pytest.mark.parametrize("bad", [-1, 256])
def test_invalid_type_rejected(bad):
    with pytest.raises(ValueError):
        StringProcList().add_node(bad, "x")
    with pytest.raises(ValueError):
        StringProcNode(bad, "x")
    with pytest.raises(ValueError):
        StringProcList().concat(bad, "x")