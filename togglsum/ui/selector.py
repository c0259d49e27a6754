"""RangeSelector: pick a subset of time entries in the terminal."""
from typing import Callable, List, Optional, Sequence

from prompt_toolkit.application import Application, get_app
from prompt_toolkit.key_binding import KeyBindings, merge_key_bindings
from prompt_toolkit.key_binding.bindings.focus import focus_next, focus_previous
from prompt_toolkit.key_binding.defaults import load_key_bindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.widgets import Box, Button, CheckboxList, Dialog, Label

from ..errors import SelectionCancelled, SelectionError
from ..reports.time_entry import TimeEntry

PAGE_SIZE = 20

HELP_TEXT = (
    "Space/Enter toggles an entry, PageUp/PageDown turns the page, "
    "Tab moves to the buttons, Ctrl-C cancels."
)


class RangeSelector:
    """Paginated multi-select over a list of time entries."""

    def __init__(self, message: str, entries: Sequence[TimeEntry],
                 summarize: Optional[Callable[[List[TimeEntry]], str]] = None,
                 page_size: int = PAGE_SIZE):
        """Initialize the RangeSelector.

        Args:
            message: Question shown as the dialog title
            entries: Entries to choose from
            summarize: Renders the current selection below the list (optional)
            page_size: Number of rows visible at once
        """
        self.message = message
        self.entries = list(entries)
        self.summarize = summarize
        self.page_size = page_size
        self.checkboxes = None

    def selection(self) -> List[TimeEntry]:
        """Get the selected entries in list order."""
        if self.checkboxes is None:
            return []
        return [self.entries[i] for i in sorted(self.checkboxes.current_values)]

    def status_text(self) -> str:
        """Get the text shown below the list."""
        chosen = self.selection()
        lines = [f"{len(chosen)} of {len(self.entries)} selected"]
        if self.summarize:
            lines.append(self.summarize(chosen))
        return "\n".join(lines)

    def build_application(self, input=None, output=None) -> Application:
        """Build the full-screen selection dialog.

        Args:
            input: prompt_toolkit input to read keys from (defaults to the terminal)
            output: prompt_toolkit output to draw on (defaults to the terminal)

        Returns:
            Application whose result is the selected entries, or None if cancelled

        Raises:
            SelectionError: If there is nothing to select
        """
        if not self.entries:
            raise SelectionError("there are no time entries to choose from")

        self.checkboxes = CheckboxList(
            values=[(i, entry.display()) for i, entry in enumerate(self.entries)]
        )

        def accept():
            get_app().exit(result=self.selection())

        def cancel():
            get_app().exit(result=None)

        dialog = Dialog(
            title=self.message,
            body=HSplit([
                Label(text=HELP_TEXT, dont_extend_height=True),
                Box(self.checkboxes, height=self.page_size, padding=0),
                Window(FormattedTextControl(self.status_text), dont_extend_height=True),
            ], padding=1),
            buttons=[
                Button(text="OK", handler=accept),
                Button(text="Cancel", handler=cancel),
            ],
            with_background=True,
        )

        bindings = KeyBindings()
        bindings.add("tab")(focus_next)
        bindings.add("s-tab")(focus_previous)

        @bindings.add("c-c")
        def _(event):
            event.app.exit(result=None)

        return Application(
            layout=Layout(dialog, focused_element=self.checkboxes),
            key_bindings=merge_key_bindings([load_key_bindings(), bindings]),
            mouse_support=True,
            full_screen=True,
            input=input,
            output=output,
        )

    def run(self, input=None, output=None) -> List[TimeEntry]:
        """Show the dialog until the user confirms or cancels.

        Args:
            input: prompt_toolkit input (optional)
            output: prompt_toolkit output (optional)

        Returns:
            Selected entries in list order

        Raises:
            SelectionCancelled: If the user cancels
            SelectionError: If there is nothing to select or the terminal fails
        """
        if not self.entries:
            raise SelectionError("there are no time entries to choose from")
        try:
            result = self.build_application(input, output).run()
        except (EOFError, KeyboardInterrupt):
            raise SelectionCancelled("Selection cancelled")
        except OSError as e:
            raise SelectionError(f"could not use the terminal: {e}")
        if result is None:
            raise SelectionCancelled("Selection cancelled")
        return result
