"""Editor for table-code input started with the ``u`` key."""

from __future__ import annotations

import gettext
import logging
from dataclasses import dataclass
from typing import Callable

from pinyintable.database import TableDatabase, TableDatabaseError
from pinyintable.lookup_table import LookupTable, Orientation, Text
from pinyintable.util import Key, Modifier

logger = logging.getLogger(__name__)

_ = gettext.gettext

TABLE_DATABASE_ADD_FREQUENCY = 10
AUX_TEXT_LEN = 50

# Shift is deliberately not part of this mask.
_REJECT_MASK = (
    Modifier.CONTROL
    | Modifier.MOD1
    | Modifier.SUPER
    | Modifier.HYPER
    | Modifier.META
    | Modifier.LOCK
)


@dataclass
class EditorConfig:
    """Settings the table editor reads."""

    page_size: int = 10
    orientation: Orientation = Orientation.SYSTEM
    comma_period_page: bool = True
    minus_equal_page: bool = True
    use_custom_table: bool = False


class TableEditor:
    """Collects table codes after a leading ``u`` and offers matching phrases."""

    def __init__(
        self,
        config: EditorConfig | None = None,
        system_database: TableDatabase | None = None,
        user_database: TableDatabase | None = None,
        on_commit: Callable[[str], None] | None = None,
    ) -> None:
        self.config = config if config is not None else EditorConfig()
        self.system_database = system_database
        self.user_database = user_database
        self.on_commit = on_commit
        self.lookup_table = LookupTable()
        self.input_text = ""
        self.cursor = 0
        self.preedit_text = ""
        self.auxiliary_text = ""
        self.lookup_table_visible = False
        self.preedit_visible = False
        self.auxiliary_visible = False

    # key handling

    def process_key_event(self, keyval: int, keycode: int, modifiers: int) -> bool:
        """Handle one key press; True if the editor consumed it."""
        if modifiers & Modifier.MOD4:
            return False
        if modifiers & _REJECT_MASK:
            return False

        if (
            self._process_edit_key(keyval)
            or self._process_page_key(keyval)
            or self._process_label_key(keyval)
            or self._process_space(keyval)
            or self._process_enter(keyval)
        ):
            return True

        self.cursor = min(self.cursor, len(self.input_text))

        if self.cursor == 0:
            if keyval not in (ord("u"), ord("U")):
                return False
            self._insert(chr(keyval))
        else:
            if self.input_text[0] not in "uU":
                return False
            if ord("a") <= keyval <= ord("z"):
                self._insert(chr(keyval))

        self._update_state_from_input()
        self.update()
        return True

    def _insert(self, ch: str) -> None:
        self.input_text = self.input_text[: self.cursor] + ch + self.input_text[self.cursor:]
        self.cursor += 1

    def _process_edit_key(self, keyval: int) -> bool:
        if keyval in (Key.DELETE, Key.KP_DELETE):
            self._remove_char_after()
        elif keyval == Key.BACKSPACE:
            self._remove_char_before()
        else:
            return False
        self._update_state_from_input()
        self.update()
        return True

    def _process_page_key(self, keyval: int) -> bool:
        if keyval == Key.COMMA and self.config.comma_period_page:
            self.page_up()
        elif keyval == Key.MINUS and self.config.minus_equal_page:
            self.page_up()
        elif keyval == Key.PERIOD and self.config.comma_period_page:
            self.page_down()
        elif keyval == Key.EQUAL and self.config.minus_equal_page:
            self.page_down()
        elif keyval in (Key.UP, Key.KP_UP):
            self.cursor_up()
        elif keyval in (Key.DOWN, Key.KP_DOWN):
            self.cursor_down()
        elif keyval in (Key.PAGE_UP, Key.KP_PAGE_UP):
            self.page_up()
        elif keyval in (Key.PAGE_DOWN, Key.KP_PAGE_DOWN):
            self.page_down()
        elif keyval == Key.ESCAPE:
            self.reset()
        else:
            return False
        return True

    def _process_label_key(self, keyval: int) -> bool:
        if ord("1") <= keyval <= ord("9"):
            return self._select_candidate_in_page(keyval - ord("1"))
        if keyval == ord("0"):
            return self._select_candidate_in_page(9)
        return False

    def _process_enter(self, keyval: int) -> bool:
        if keyval != Key.RETURN or not self.input_text:
            return False
        self._commit(self.input_text)
        self.reset()
        return True

    def _process_space(self, keyval: int) -> bool:
        if keyval not in (Key.SPACE, Key.KP_SPACE):
            return False
        return self._select_candidate(self.lookup_table.cursor_pos)

    def candidate_clicked(self, index: int, button: int, state: int) -> None:
        """Select the candidate at ``index`` on the current page."""
        self._select_candidate_in_page(index)

    # selection

    def _select_candidate_in_page(self, index: int) -> bool:
        page_size = self.lookup_table.page_size
        if index >= page_size:
            return False
        index += (self.lookup_table.cursor_pos // page_size) * page_size
        return self._select_candidate(index)

    def _select_candidate(self, index: int) -> bool:
        if index >= len(self.lookup_table):
            return False
        phrase = self.lookup_table.candidate(index).text

        if self.config.use_custom_table:
            self._learn(phrase)

        self._commit(phrase)
        self.reset()
        return True

    def _learn(self, phrase: str) -> None:
        database = self.user_database
        if database is None:
            logger.warning("no user table database to learn from selection")
            return
        try:
            freq = database.get_phrase_info(phrase)
        except (KeyError, TableDatabaseError):
            freq = 0
        try:
            database.update_phrase(phrase, freq + TABLE_DATABASE_ADD_FREQUENCY)
        except TableDatabaseError:
            logger.warning("can't update phrase frequency for %s", phrase)

    def _commit(self, text: str) -> None:
        if self.on_commit is not None:
            self.on_commit(text)

    def _table_database(self) -> TableDatabase:
        database = self.user_database if self.config.use_custom_table else self.system_database
        if database is None:
            raise TableDatabaseError("table database is not available")
        return database

    # state

    def _update_state_from_input(self) -> bool:
        if not self.input_text:
            self.preedit_text = ""
            self.auxiliary_text = ""
            self.cursor = 0
            self._clear_lookup_table()
            return False

        first = self.input_text[0]
        if first not in "uU":
            logger.warning("u is expected in input text.")
            self.auxiliary_text = ""
            self._clear_lookup_table()
            return False

        if len(self.input_text) == 1:
            self._clear_lookup_table()
            if self.config.use_custom_table:
                help_string = _("Please use table code to input.")
            else:
                help_string = _('Please use "hspnz" to input.')
            padding = " " * max(0, AUX_TEXT_LEN - len(help_string))
            self.auxiliary_text = first + padding + help_string
            return True

        prefix = self.input_text[1:]
        self.auxiliary_text = f"{first} {prefix}"

        try:
            phrases = self._table_database().list_phrases(prefix)
        except TableDatabaseError:
            return False

        self._clear_lookup_table()
        for phrase in phrases:
            self.lookup_table.append_candidate(Text(phrase))
        return True

    def _clear_lookup_table(self) -> None:
        self.lookup_table.clear()
        self.lookup_table.page_size = self.config.page_size
        self.lookup_table.orientation = Orientation(self.config.orientation)

    def _remove_char_before(self) -> bool:
        if self.cursor <= 0:
            self.cursor = 0
            return False
        if self.cursor > len(self.input_text):
            self.cursor = len(self.input_text)
            return False
        self.input_text = self.input_text[: self.cursor - 1] + self.input_text[self.cursor:]
        self.cursor = max(0, self.cursor - 1)
        return True

    def _remove_char_after(self) -> bool:
        if self.cursor < 0:
            self.cursor = 0
            return False
        if self.cursor >= len(self.input_text):
            self.cursor = len(self.input_text)
            return False
        self.input_text = self.input_text[: self.cursor] + self.input_text[self.cursor + 1:]
        self.cursor = min(self.cursor, len(self.input_text))
        return True

    # navigation

    def page_up(self) -> None:
        if self.lookup_table.page_up():
            self.update()

    def page_down(self) -> None:
        if self.lookup_table.page_down():
            self.update()

    def cursor_up(self) -> None:
        if self.lookup_table.cursor_up():
            self.update()

    def cursor_down(self) -> None:
        if self.lookup_table.cursor_down():
            self.update()

    # display

    def update(self) -> None:
        """Refresh what is shown from the current state."""
        self.lookup_table_visible = len(self.lookup_table) > 0
        self.preedit_visible = bool(self.preedit_text)
        self.auxiliary_visible = bool(self.auxiliary_text)

    def update_all(self) -> None:
        self._update_state_from_input()
        self.update()

    def reset(self) -> None:
        """Drop the input and refresh."""
        self.input_text = ""
        self._update_state_from_input()
        self.update()