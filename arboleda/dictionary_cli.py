"""Interactive menu for managing the word dictionary."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from arboleda.dictionary import (
    MAX_DEFINITION_LENGTH,
    MAX_SYNONYM_LENGTH,
    Category,
    Dictionary,
    DuplicateWordError,
    Entry,
    WordNotFoundError,
)

_MENU = (
    "┌-------------------------┐\n"
    "|      MENU PRINCIPAL     |\n"
    "└-------------------------┘\n"
    "1-.Agregar palabra al diccionario.\n"
    "2-.Modificar elementos de una palabra.\n"
    "3-.Eliminar Palabra.\n"
    "4-.Mostrar elementos de una palabra.\n"
    "5-.Listado de palabras por categoria gramatical.\n"
    "6-.Listado de palabras por letra.\n"
    "7-.Listado de palabras en orden alfabetico.\n"
    "8-.Imprimir arbol binario.\n"
    "9-.Salir"
)

_EXIT_OPTION = 9


def _category_menu() -> list[str]:
    return [f"{category.value}-.{category.label()}." for category in Category]


class DictionaryShell:
    """A menu-driven session over a :class:`Dictionary`."""

    def __init__(
        self,
        dictionary: Dictionary | None = None,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
    ) -> None:
        self.dictionary = dictionary if dictionary is not None else Dictionary()
        self._input = input_func
        self.output = output if output is not None else sys.stdout

    # -- input and output helpers ---------------------------------------

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.output)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).rstrip("\r\n")

    def _ask_int(self, prompt: str) -> int | None:
        try:
            return int(self._ask(prompt).strip())
        except ValueError:
            return None

    def _ask_category(self) -> Category:
        self._say("Digite la opcion de acuerdo al tipo de palabra:", *_category_menu())
        while True:
            option = self._ask_int("Su opcion:")
            if option is not None and 1 <= option <= len(Category):
                return Category(option)
            self._say("Error!: Vuelva a ingresar una de las opciones validas!")

    def _ask_synonyms(self) -> list[str]:
        count = self._ask_int("Digite cuantos sinonimos desea agregar:") or 0
        synonyms = []
        for number in range(max(count, 0)):
            prompt = "Escriba el sinonimo:" if number == 0 else "Escriba un sinonimo: "
            synonyms.append(self._ask(prompt))
        return synonyms

    def _require_words(self, message: str) -> bool:
        if not self.dictionary:
            self._say(message)
            return False
        return True

    # -- menu actions ---------------------------------------------------

    def add_word(self) -> None:
        """Ask for a new entry and add it, keeping the tree balanced."""
        if self.dictionary:
            prompt = "Escriba otra palabra que ira en el diccionario:"
        else:
            prompt = "Escriba la primera palabra que ira en el diccionario:"
        word = self._ask(prompt)
        definition = self._ask("Escriba la definicion de la palabra:")
        category = self._ask_category()
        synonyms: list[str] = []
        answer = self._ask_int(
            "Desea agregar una lista de sinonimos?\n1-.Si.\n2-.No.\nSu opcion:"
        )
        if answer == 1:
            synonyms = self._ask_synonyms()
        try:
            entry = Entry(word, definition, category, synonyms)
        except ValueError as exc:
            self._say(f"Error!: {exc}")
            return
        try:
            self.dictionary.insert_balanced(entry)
        except DuplicateWordError:
            self._say("Error! : No puede repetir palabras!")
            return
        self._say("Creado con exito!")

    def modify_word(self) -> None:
        """Change the definition, category or synonyms of a word."""
        if not self._require_words("Error!: No ninguna palabra para modificar!"):
            return
        word = self._ask(
            "Escribe la palabra a la que deseas cambiarle sus caracteristicas:"
        )
        try:
            entry = self.dictionary.find(word)
        except WordNotFoundError:
            self._say("Error!: La palabra no existe!")
            return
        option = self._ask_int(
            "Digita la caracteristica que deseas cambiar:\n"
            "1-.Definicion.\n2-.Categoria gramatical.\n3-.Lista de sinonimos.\n"
        )
        if option == 1:
            definition = self._ask(
                "Escriba la nueva definicion de la palabra seleccionada:"
            )
            if len(definition) > MAX_DEFINITION_LENGTH:
                self._say(
                    f"Error!: la definicion supera {MAX_DEFINITION_LENGTH} caracteres"
                )
                return
            entry.definition = definition
        elif option == 2:
            self._say("Cambiando la categoria gramatical:")
            entry.category = self._ask_category()
        elif option == 3:
            if not self._change_synonyms(entry):
                return
        else:
            self._say("Error!: Esa opcion no existe!")
            return
        self._say("Exito!", "Modificada con exito!")

    def _change_synonyms(self, entry: Entry) -> bool:
        if not entry.synonyms:
            self._say("Aun no hay una lista creada!")
            answer = self._ask_int("Desea crear una?\n1-.Si.\n2-.No.\nSu opcion:")
            if answer != 1:
                return True
            synonyms = self._ask_synonyms()
            if any(len(synonym) > MAX_SYNONYM_LENGTH for synonym in synonyms):
                self._say(
                    f"Error!: un sinonimo supera {MAX_SYNONYM_LENGTH} caracteres"
                )
                return False
            entry.synonyms.extend(synonyms)
            return True
        self._say(*(f"Sustantivo: {synonym}" for synonym in entry.synonyms))
        old = self._ask("Escriba el sustantivo que desea cambiar:")
        if old not in entry.synonyms:
            self._say("Error!: Ese sinonimo no existe!")
            return False
        new = self._ask("Escriba el nuevo sustantivo:")
        try:
            entry.replace_synonym(old, new)
        except ValueError as exc:
            self._say(f"Error!: {exc}")
            return False
        return True

    def delete_word(self) -> None:
        """Ask for a word and remove it."""
        if not self._require_words("Error!: No hay nada para borrar!"):
            return
        word = self._ask("Escriba la palabra que desea eliminar:")
        try:
            self.dictionary.remove(word)
        except WordNotFoundError:
            self._say("Error!: La palabra no existe!")
            return
        self._say("Eliminada con exito!")

    def show_word(self) -> None:
        """Ask for a word and show everything stored about it."""
        if not self._require_words("Error!: No hay nada para mostrar!"):
            return
        word = self._ask("Escriba la palabra que desea buscar:")
        try:
            entry = self.dictionary.find(word)
        except WordNotFoundError:
            self._say("Error!: La palabra no existe!")
            return
        self._say("Resultados de la busqueda:", entry.describe())

    def list_by_category(self) -> None:
        """List the words of one grammatical category."""
        if not self._require_words("Error! : No hay nada para mostrar!"):
            return
        self._say(
            "Categorias gramaticales:",
            "De las siguientes categorias elija una a buscar por palabra:",
            *_category_menu(),
        )
        option = self._ask_int("")
        if option is None or not 1 <= option <= len(Category):
            self._say("Error!: Esa categoria no existe!")
            return
        category = Category(option)
        for entry in self.dictionary.by_category(category):
            self._say(f"Tipo:{category.label()} Palabra:{entry.word}")

    def list_by_letter(self) -> None:
        """Show every word that starts with a given letter."""
        if not self._require_words("Error! : No hay nada para mostrar!"):
            return
        text = self._ask(
            "Ingrese la letra que mostrara todos los resultados de palabras "
            "del diccionario:"
        )
        if not text:
            self._say("Error!: No se ingreso ninguna letra!")
            return
        letter = text[0]
        for entry in self.dictionary.by_letter(letter):
            self._say(
                f"Resultados de la busqueda:{letter}",
                entry.describe(),
                "***************************************",
            )

    def list_alphabetical(self) -> None:
        """List every word in alphabetical order."""
        if not self._require_words("Error!: Aun no hay nada para mostrar!"):
            return
        self._say("Lista de palabras por orden alfabetico:")
        for word in self.dictionary.words():
            self._say(f"{word[0]}:{word}")

    def print_tree(self) -> None:
        """Draw the tree of words."""
        drawing = self.dictionary.render(100, 1, 0)
        if drawing:
            self._say(drawing)

    def run(self) -> None:
        """Show the menu and carry out choices until exit or end of input."""
        actions = {
            1: self.add_word,
            2: self.modify_word,
            3: self.delete_word,
            4: self.show_word,
            5: self.list_by_category,
            6: self.list_by_letter,
            7: self.list_alphabetical,
            8: self.print_tree,
        }
        try:
            while True:
                self._say(_MENU)
                option = self._ask_int("Su opcion: ")
                if option == _EXIT_OPTION:
                    return
                action = actions.get(option) if option is not None else None
                if action is None:
                    self._say("Error!: Esa opcion no existe!")
                else:
                    action()
                self._input("")
        except EOFError:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive dictionary menu."""
    parser = argparse.ArgumentParser(
        prog="palabras",
        description="Manage a dictionary of words stored in a binary search tree.",
    )
    parser.parse_args(argv)
    DictionaryShell(Dictionary()).run()
    return 0