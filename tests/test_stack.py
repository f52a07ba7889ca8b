import builtins

import pytest

from arboleda.stack import Stack, main


def _feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_empty_stack():
    stack = Stack()
    assert not stack
    assert len(stack) == 0
    assert list(stack) == []


def test_initial_items_last_is_top():
    stack = Stack([1, 2, 3])
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3


def test_push_and_pop_are_lifo():
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [30, 20, 10]
    assert not stack


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_remove_at_top():
    stack = Stack([1, 2, 3])
    assert stack.remove_at(1) == 3
    assert list(stack) == [2, 1]


def test_remove_at_bottom():
    stack = Stack([1, 2, 3])
    assert stack.remove_at(3) == 1
    assert list(stack) == [3, 2]


def test_remove_at_middle():
    stack = Stack([1, 2, 3])
    assert stack.remove_at(2) == 2
    assert list(stack) == [3, 1]


def test_remove_at_invalid_position():
    stack = Stack([1])
    with pytest.raises(ValueError):
        stack.remove_at(0)
    assert list(stack) == [1]


def test_remove_at_beyond_bottom():
    stack = Stack([1, 2])
    with pytest.raises(IndexError):
        stack.remove_at(3)
    assert len(stack) == 2


def test_clear():
    stack = Stack([4, 5])
    stack.clear()
    assert len(stack) == 0
    assert not stack


def test_main_print_shows_top_first(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "3", "1", "2", "3", "", "2", "", "6"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "cabeza_pila===========fondo_pila" in out
    assert "3 2 1 " in out
    assert "Datos mostrados correctamente." in out


def test_main_count(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "2", "7", "8", "", "5", "", "6"])
    assert main([]) == 0
    assert "Hay 2 datos en la pila." in capsys.readouterr().out


def test_main_remove_and_count(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "2", "7", "8", "", "3", "1", "", "5", "", "6"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Dato eliminado exitosamente de la pila." in out
    assert "Hay 1 datos en la pila." in out


def test_main_remove_invalid_position(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "1", "7", "", "3", "0", "", "3", "5", "", "6"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Posición inválida." in out
    assert "más allá del final de la pila" in out


def test_main_empty_messages(monkeypatch, capsys):
    _feed(monkeypatch, ["2", "", "3", "", "4", "", "6"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "La pila esta vacia, no hay nada que imprimir." in out
    assert "La pila está vacía, no hay nada que eliminar." in out
    assert "La pila esta vacia." in out


def test_main_clear(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "1", "9", "", "4", "", "5", "", "6"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Datos eliminados exitosamente!" in out
    assert "Hay 0 datos en la pila." in out


def test_main_stops_at_end_of_input(monkeypatch):
    _feed(monkeypatch, ["1"])
    assert main([]) == 0