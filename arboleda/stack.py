"""An integer stack with an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence


class Stack:
    """A last-in first-out stack; iteration runs from top to bottom."""

    def __init__(self, items: Iterable[int] | None = None) -> None:
        self._items: list[int] = list(items) if items is not None else []

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._items.append(value)

    def pop(self) -> int:
        """Take the top value off and return it."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def remove_at(self, position: int) -> int:
        """Remove and return the value at ``position``, counted from 1 at the top."""
        if position < 1:
            raise ValueError("position must be 1 or greater")
        if position > len(self._items):
            raise IndexError("position is beyond the bottom of the stack")
        return self._items.pop(len(self._items) - position)

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return reversed(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


_MENU = (
    "MENU\n"
    "1-.Insertar un nodo a la pila.\n"
    "2-.Imprimir pila.\n"
    "3-.Quitar de la pila.\n"
    "4-.Vaciar la pila.\n"
    "5-.Consultar el numero de datos de la pila.\n"
    "6-.Salir."
)


def _read_int(prompt: str = "") -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _read_value(prompt: str) -> int:
    while True:
        value = _read_int(prompt)
        if value is not None:
            return value
        print("Numero incorrecto, vuelva a intentarlo.")


def _add(stack: Stack) -> None:
    count = _read_int("Escriba el numero de datos que quiere agregar a la pila: ")
    for _ in range(count or 0):
        stack.push(_read_value("Escriba un numero que se guardara en la pila: "))
    print("Dato(s) agregado(s) correctamente!")
    input()


def _show(stack: Stack) -> None:
    if not stack:
        print("La pila esta vacia, no hay nada que imprimir.")
        input()
        return
    print("cabeza_pila===========fondo_pila")
    print("".join(f"{value} " for value in stack))
    print("*****************************")
    print("Datos mostrados correctamente.")
    input()


def _remove(stack: Stack) -> None:
    if not stack:
        print("La pila está vacía, no hay nada que eliminar.")
        input()
        return
    position = _read_int(
        "Ingrese la posición del dato que desea eliminar (empezando desde 1): "
    )
    try:
        stack.remove_at(position if position is not None else 0)
    except ValueError:
        print("Posición inválida.")
    except IndexError:
        print("La posición especificada está más allá del final de la pila.")
    else:
        print("Dato eliminado exitosamente de la pila.")
    input()


def _empty(stack: Stack) -> None:
    if not stack:
        print("La pila esta vacia.")
    else:
        stack.clear()
        print("Datos eliminados exitosamente!")
    input()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive stack menu."""
    parser = argparse.ArgumentParser(
        prog="pila", description="Manage a stack of integers interactively."
    )
    parser.parse_args(argv)
    stack = Stack()
    try:
        while True:
            print(_MENU)
            option = _read_int("Su opcion: ")
            if option == 1:
                _add(stack)
            elif option == 2:
                _show(stack)
            elif option == 3:
                _remove(stack)
            elif option == 4:
                _empty(stack)
            elif option == 5:
                print(f"Hay {len(stack)} datos en la pila.")
                input()
            elif option == 6:
                break
    except EOFError:
        pass
    return 0