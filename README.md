# pinyintable

Building blocks for a Chinese table-code input method, in plain Python with
no third-party dependencies.

## Modules

- `pinyintable.database` — `TableDatabase`, a phrase table stored in an
  SQLite file. `TableDatabase.create_database(path)` makes a fresh, empty
  table (replacing any existing file) and `TableDatabase.is_database_existed(path)`
  checks that a file is a table of the expected version. An instance opens a
  file read-only or writable (`open_database`, or the constructor) and works
  as a context manager. It offers:
  - `list_phrases(prefix)` — phrases whose table keys start with `prefix`,
    ordered by phrase length, then total frequency (descending), then id;
  - `get_phrase_info(phrase)` — the phrase's frequency, `KeyError` if absent;
  - `update_phrase(phrase, freq)`, `delete_phrase(phrase)`, `clear_table()`;
  - `import_table(path)` — reads whitespace-separated `tabkeys phrase [freq]`
    records (frequency defaults to 10) and appends them after the highest id;
  - `export_table(path)` — writes `tabkeys<TAB>phrase<TAB>freq` lines in id order.

  Failures raise `TableDatabaseError`. `open_databases(system_paths, user_path)`
  opens the first system table that opens read-only, and the user table,
  creating it when missing or outdated; either is `None` if it cannot be opened.
- `pinyintable.table_editor` — `TableEditor` turns key events into input text,
  auxiliary text and a candidate `LookupTable`. Input starts with `u` or `U`,
  followed by lower-case table codes; candidates come from the system database,
  or from the user database when `EditorConfig.use_custom_table` is set (then a
  selection also adds 10 to the phrase's frequency). Digits `1`–`9` and `0`
  pick from the current page, space picks the candidate under the cursor,
  Return commits the raw input, Escape resets, and arrow, page, `,`/`.` and
  `-`/`=` keys move through the table. Committed text is passed to the
  `on_commit` callback. Keys with Ctrl, Alt, Super, Hyper, Meta, Mod4 or Caps
  Lock held are not handled.
- `pinyintable.lookup_table` — `LookupTable`, a paged candidate list with a
  cursor (optionally wrapping round), labels and an `Orientation`; `Text`,
  display text with style attributes.
- `pinyintable.punct` — `punct_candidates(key)` gives the full-width and
  alternative symbols for an ASCII punctuation key, digit or letter;
  `punct_keys()` lists every key.
- `pinyintable.emoji_english` — `english_emoji(word)` for an exact English
  keyword, `english_emoji_matches(prefix)` for all `(keyword, emoji)` pairs
  starting with a prefix.
- `pinyintable.properties` — `Property`, `PropList`, `PropType` and
  `PropState` for engine properties shown on a panel.
- `pinyintable.signal` — `Signal`, a callable holding a single handler.
- `pinyintable.util` — `Key` and `Modifier` values, and the
  `cmshm_filter`/`scmshm_filter`/`cmshm_test`/`scmshm_test` modifier helpers.
- `pinyintable.xmlutil` — `parse_engine_version(path)` returns the text of the
  first `<version>` element of an engine description file (or `None`);
  `load_file_content` and `show_message`, which logs the message and returns it.

## Example

```python
from pinyintable.database import TableDatabase
from pinyintable.table_editor import EditorConfig, TableEditor
from pinyintable.punct import punct_candidates
from pinyintable.emoji_english import english_emoji

TableDatabase.create_database("user.db")
with TableDatabase("user.db", writable=True) as db:
    db.import_table("table.txt")
    print(db.list_phrases("a"))

    committed = []
    editor = TableEditor(
        EditorConfig(use_custom_table=True),
        user_database=db,
        on_commit=committed.append,
    )
    for ch in "ua":
        editor.process_key_event(ord(ch), 0, 0)
    print(editor.auxiliary_text, [c.text for c in editor.lookup_table])
    editor.process_key_event(ord("1"), 0, 0)
    print(committed)

print(punct_candidates(","))   # ('，', '、', '﹐', '﹑')
print(english_emoji("apple"))  # 🍎
```

## What it does not do

- It does not connect to any input method framework: `TableEditor` keeps what
  should be shown in attributes (`auxiliary_text`, `lookup_table`,
  `lookup_table_visible` and the like) and hands committed text to a callback.
- It does not convert pinyin to Chinese characters; it only looks phrases up
  by table code.
- Emoji lookup is by English keyword only.
- It has no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```