"""A plain binary tree built by choosing, at each node, which branch to follow."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Which child of a node to follow or fill."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Node:
    """One node of the tree holding an integer."""

    value: int
    left: Node | None = None
    right: Node | None = None


def _child(node: Node, side: Side) -> Node | None:
    return getattr(node, side.value)


class BinaryTree:
    """A binary tree whose shape is chosen by the caller, not by ordering."""

    def __init__(self) -> None:
        self.root: Node | None = None

    def set_root(self, value: int) -> Node:
        """Create the root node; the tree must still be empty."""
        if self.root is not None:
            raise ValueError("the tree already has a root")
        self.root = Node(value)
        return self.root

    def node_at(self, path: Sequence[Side]) -> Node:
        """Return the node reached by following ``path`` from the root."""
        node = self.root
        if node is None:
            raise LookupError("the tree has no root")
        for step, side in enumerate(path, start=1):
            node = _child(node, side)
            if node is None:
                raise LookupError(f"no node at step {step} of the path")
        return node

    def insert(self, path: Sequence[Side], value: int) -> Node:
        """Add ``value`` as a new child at ``path``.

        All sides but the last lead to the parent; the last side names the
        empty child slot that receives the new node.
        """
        if not path:
            raise ValueError("an insertion path needs at least one side")
        *to_parent, side = path
        parent = self.node_at(to_parent)
        if _child(parent, side) is not None:
            raise ValueError(f"the {side.value} child is already occupied")
        node = Node(value)
        setattr(parent, side.value, node)
        return node

    def inorder(self) -> Iterator[int]:
        """Yield the values in in-order sequence: left, node, right."""
        pending: list[Node] = []
        node = self.root
        while pending or node is not None:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            yield node.value
            node = node.right

    def __iter__(self) -> Iterator[int]:
        return self.inorder()

    def __len__(self) -> int:
        return sum(1 for _ in self.inorder())

    def __bool__(self) -> bool:
        return self.root is not None


def format_inorder(tree: BinaryTree) -> str:
    """Render the in-order values as ``a->b->c->``."""
    return "".join(f"{value}->" for value in tree)


_MENU = (
    "*****MENU******\n"
    "1-.Agregar un nodo al arbol binario.\n"
    "2-.Mostrar arbol binario inorden.\n"
    "3-.Salir"
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


def _add_interactively(tree: BinaryTree) -> None:
    if not tree:
        answer = _read_int(
            "Aun no hay una raiz, desea agregar una?\n1-.Si\n2-.No\n"
        )
        if answer == 1:
            tree.set_root(_read_value("Inserte el numero que ira en este nodo:"))
        return

    path: list[Side] = []
    while True:
        node = tree.node_at(path)
        if node.left is None and node.right is None:
            answer = _read_int(
                "Ambos lados estan vacios\nA que lado desea agregar el nodo?\n"
                "1-.Izquierda\n2-.Derecha\n"
            )
            if answer in (1, 2):
                side = Side.LEFT if answer == 1 else Side.RIGHT
                value = _read_value("Ingrese el numero que habra en este nodo:")
                tree.insert([*path, side], value)
            return
        if node.left is not None and node.right is None:
            answer = _read_int(
                "Solo esta disponible el lado derecho.\n"
                "1-.desea insertar en ese lado\n"
                "2-.desea seguir por rama izquierda\n"
            )
            if answer == 1:
                value = _read_value("Ingrese el numero que habra en este nodo:")
                tree.insert([*path, Side.RIGHT], value)
                return
            if answer != 2:
                return
            path.append(Side.LEFT)
            continue
        if node.left is None and node.right is not None:
            answer = _read_int(
                "Solo el lado izquierdo esta disponible.\n"
                "1-.desea insertar en ese lado\n"
                "2-.desea seguir por rama derecha\n"
            )
            if answer == 1:
                value = _read_value("Inserte el numero que habra en este nodo:")
                tree.insert([*path, Side.LEFT], value)
                return
            if answer != 2:
                return
            path.append(Side.RIGHT)
            continue
        answer = _read_int(
            "Ambos estan llenos!\n"
            "1-.Desea moverse por la izquierda de nodo\n"
            "2-.Desea moverse a la derecha del nodo\n"
        )
        if answer == 1:
            path.append(Side.LEFT)
        elif answer == 2:
            path.append(Side.RIGHT)
        else:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive binary tree menu."""
    parser = argparse.ArgumentParser(
        prog="arbol-binario",
        description="Build a binary tree interactively and show it in order.",
    )
    parser.parse_args(argv)
    tree = BinaryTree()
    try:
        while True:
            print(_MENU)
            option = _read_int("Su opcion:")
            if option == 1:
                _add_interactively(tree)
            elif option == 2:
                if not tree:
                    print("No se ha creado un arbol aun!")
                else:
                    print(format_inorder(tree))
                    print("Mostrado correctamente!")
                input()
            elif option == 3:
                break
            else:
                print("Numero incorrecto o error, vuelva a intentarlo!")
                input()
    except EOFError:
        pass
    return 0