import io
from unittest import mock

import pytest

from arboleda.dictionary import Category, Dictionary, Entry
from arboleda.dictionary_cli import DictionaryShell, main


def make_shell(lines, dictionary=None):
    feed = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    out = io.StringIO()
    return DictionaryShell(dictionary, fake_input, out), out


@pytest.fixture
def filled():
    dictionary = Dictionary()
    dictionary.insert_balanced(Entry("casa", "lugar", Category.NOUN, ["hogar"]))
    dictionary.insert_balanced(Entry("correr", "moverse", Category.VERB))
    dictionary.insert_balanced(Entry("arbol", "planta", Category.NOUN))
    return dictionary


def test_add_word_with_synonyms():
    shell, out = make_shell(["casa", "lugar", "1", "1", "2", "hogar", "vivienda"])
    shell.add_word()
    entry = shell.dictionary.find("casa")
    assert entry.definition == "lugar"
    assert entry.category is Category.NOUN
    assert entry.synonyms == ["hogar", "vivienda"]
    assert "Creado con exito!" in out.getvalue()


def test_add_word_retries_invalid_category():
    shell, out = make_shell(["sol", "astro", "0", "12", "3", "2"])
    shell.add_word()
    assert shell.dictionary.find("sol").category is Category.VERB
    assert "Vuelva a ingresar una de las opciones validas" in out.getvalue()


def test_add_duplicate_word_reports_error(filled):
    shell, out = make_shell(["casa", "otra", "1", "2"], filled)
    shell.add_word()
    assert len(filled) == 3
    assert filled.find("casa").definition == "lugar"
    assert "No puede repetir palabras" in out.getvalue()


def test_add_too_long_word_is_rejected():
    shell, out = make_shell(["x" * 40, "def", "1", "2"])
    shell.add_word()
    assert len(shell.dictionary) == 0
    assert "Error!" in out.getvalue()


def test_modify_definition(filled):
    shell, out = make_shell(["casa", "1", "edificio"], filled)
    shell.modify_word()
    assert filled.find("casa").definition == "edificio"
    assert "Modificada con exito!" in out.getvalue()


def test_modify_category(filled):
    shell, _ = make_shell(["arbol", "2", "2"], filled)
    shell.modify_word()
    assert filled.find("arbol").category is Category.ADJECTIVE


def test_modify_creates_synonym_list(filled):
    shell, _ = make_shell(["correr", "3", "1", "2", "trotar", "huir"], filled)
    shell.modify_word()
    assert filled.find("correr").synonyms == ["trotar", "huir"]


def test_modify_replaces_synonym(filled):
    shell, out = make_shell(["casa", "3", "hogar", "morada"], filled)
    shell.modify_word()
    assert filled.find("casa").synonyms == ["morada"]
    assert "Sustantivo: hogar" in out.getvalue()


def test_modify_missing_word(filled):
    shell, out = make_shell(["perro"], filled)
    shell.modify_word()
    assert "perro" not in filled
    assert "no existe" in out.getvalue()


def test_modify_on_empty_dictionary():
    shell, out = make_shell([])
    shell.modify_word()
    assert "No ninguna palabra para modificar" in out.getvalue()


def test_delete_word(filled):
    shell, out = make_shell(["casa"], filled)
    shell.delete_word()
    assert "casa" not in filled
    assert filled.words() == ["arbol", "correr"]
    assert "Eliminada con exito!" in out.getvalue()


def test_delete_missing_word(filled):
    shell, out = make_shell(["perro"], filled)
    shell.delete_word()
    assert len(filled) == 3
    assert "no existe" in out.getvalue()


def test_show_word(filled):
    shell, out = make_shell(["casa"], filled)
    shell.show_word()
    assert filled.find("casa").describe() in out.getvalue()


def test_list_by_category(filled):
    shell, out = make_shell(["3"], filled)
    shell.list_by_category()
    text = out.getvalue()
    assert "Tipo:Verbo Palabra:correr" in text
    assert "Palabra:casa" not in text


def test_list_by_letter(filled):
    shell, out = make_shell(["c"], filled)
    shell.list_by_letter()
    text = out.getvalue()
    assert "Palabra: casa" in text
    assert "Palabra: correr" in text
    assert "Palabra: arbol" not in text


def test_list_alphabetical_order(filled):
    shell, out = make_shell([], filled)
    shell.list_alphabetical()
    lines = out.getvalue().splitlines()
    assert lines[1:] == ["a:arbol", "c:casa", "c:correr"]


def test_print_tree_matches_render(filled):
    shell, out = make_shell([], filled)
    shell.print_tree()
    assert out.getvalue().rstrip("\n") == filled.render(100, 1, 0)


def test_run_session_adds_and_exits():
    shell, out = make_shell(["1", "luna", "satelite", "1", "2", "", "7", "", "9"])
    shell.run()
    assert shell.dictionary.words() == ["luna"]
    assert "l:luna" in out.getvalue()


def test_run_reports_unknown_option_and_stops_at_eof():
    shell, out = make_shell(["42", ""])
    shell.run()
    assert "Esa opcion no existe" in out.getvalue()
    assert len(shell.dictionary) == 0