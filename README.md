# arboleda

Three small interactive console programs for working with classic data
structures. The library classes behind them can also be used on their own.
The menus and messages are in Spanish.

## Installing

```
pip install .
```

## Commands

- `arboleda-tree`: builds a binary tree of integers one node at a time. When
  you add a node, it walks down from the root. At each node it asks which free
  side to fill or which branch to follow. Option 2 prints the values in order
  (`3->5->8->`).
- `arboleda-stack`: pushes integers onto a stack and prints it from top to
  bottom. It can also remove the item at a given position (counted from 1 at
  the top), empty the stack and report how many items it holds.
- `arboleda-dictionary`: a word dictionary kept in a binary search tree that
  is rebalanced at its root after each insertion. Each entry holds a word, its
  definition, its grammatical category (one of nine) and a list of synonyms.
  From the menu you can:
  - add, modify, delete and look up words;
  - list words by category, by first letter or in alphabetical order;
  - draw the tree as text.

Each command shows a numbered menu and reads your choice from standard input.
Each command stops when you choose its exit option or when input ends.

## Using the library

### `arboleda.stack`

`Stack` iterates from top to bottom:

```python
from arboleda.stack import Stack

stack = Stack([1, 2, 3])
stack.push(4)
list(stack)         # [4, 3, 2, 1], top first
stack.remove_at(2)  # removes and returns 3
stack.pop()         # 4
len(stack)          # 2
stack.clear()
```

- `pop()` on an empty stack raises `IndexError`.
- `remove_at()` raises `ValueError` for a position below 1.
- `remove_at()` raises `IndexError` for a position past the bottom.

### `arboleda.binary_tree`

The caller decides where each node goes. A path is a list of `Side` values
followed from the root. The last side names the empty child slot to fill.

```python
from arboleda.binary_tree import BinaryTree, Side, format_inorder

tree = BinaryTree()
tree.set_root(5)
tree.insert([Side.LEFT], 3)
tree.insert([Side.RIGHT], 8)
tree.node_at([Side.LEFT]).value  # 3
list(tree.inorder())             # [3, 5, 8]
format_inorder(tree)             # "3->5->8->"
```

- `set_root()` on a tree that already has a root raises `ValueError`.
- `insert()` into an occupied slot raises `ValueError`.
- `insert()` with an empty path raises `ValueError`.
- `node_at()` along a path that leaves the tree raises `LookupError`.

### `arboleda.dictionary`

```python
from arboleda.dictionary import Category, Dictionary, Entry

words = Dictionary()
words.insert_balanced(Entry("casa", "Edificio para habitar", Category.NOUN, ["hogar"]))
words.insert_balanced(Entry("correr", "Ir deprisa", Category.VERB))
words.words()                              # ["casa", "correr"]
print(words.find("casa").describe())
[e.word for e in words.by_letter("c")]     # ["casa", "correr"]
[e.word for e in words.by_category(Category.VERB)]  # ["correr"]
words.remove("casa")
"casa" in words                            # False
```

Entries:

- A word may be at most 28 characters, a definition 68, and each synonym 28.
- Longer text, or an empty word, raises `ValueError`.
- `Entry.replace_synonym(old, new)` replaces every matching synonym and
  returns how many it replaced.

Dictionary:

- `insert()` adds an entry as a plain leaf, without rebalancing.
- `insert_balanced()` adds an entry, then applies the single or double rotation
  needed at the root.
- `height()` gives the number of levels in the tree.
- `layout()` gives the drawing position of each word.
- `render()` draws the tree as text lines.

Errors:

- Inserting a word that is already present raises `DuplicateWordError`, a
  `ValueError`.
- Looking up or removing a missing word raises `WordNotFoundError`, a
  `KeyError`.

`arboleda.dictionary_cli.DictionaryShell` runs the dictionary menu. It takes an
input function and an output stream, so you can drive it from a script.

## What it does not do

Nothing is saved. The tree, the stack and the dictionary live only for as long
as the command runs, and there is no way to load or store them in a file.

## Running the tests

```
pip install .[test]
pytest
```