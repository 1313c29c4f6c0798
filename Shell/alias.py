from collections import namedtuple
from Shell.config import MAX_ALIASES

AliasEntry = namedtuple("AliasEntry", ["name", "value"])


class AliasTable:
    """
    Fixed number of slots, each empty (None) or holding one AliasEntry.
    Names are unique; there is no way to remove an entry.
    """

    def __init__(self, capacity=MAX_ALIASES):
        self.slots = [None] * capacity

    def __len__(self):
        return sum(1 for entry in self.slots if entry is not None)

    def set_alias(self, name, value):
        """
        Update `name` in place if it exists, else take the first free slot.
        Returns False when the table is full.
        """
        free = None
        for i, entry in enumerate(self.slots):
            if entry is None:
                if free is None:
                    free = i
            elif entry.name == name:
                self.slots[i] = AliasEntry(name, value)
                return True

        if free is None:
            return False
        self.slots[free] = AliasEntry(name, value)
        return True

    def get(self, name):
        for entry in self.slots:
            if entry is not None and entry.name == name:
                return entry.value
        return None

    def list_aliases(self):
        return [f"{e.name}='{e.value}'" for e in self.slots if e is not None]


def parse_alias_argument(table, text):
    """
    Handle the text after `alias`.
    Returns the listing when no `=` is present, otherwise None.
    """
    if "=" not in text:
        return table.list_aliases()

    pieces = [p for p in text.split("=") if p]
    if len(pieces) < 2:
        # `name=` with nothing after it
        return None

    name, val = pieces[0].strip(), pieces[1].strip().strip("'\"")
    if name and len(name.split()) == 1:
        # A full table is not reported
        table.set_alias(name, val)
    return None


def expand_alias(table, tokens):
    """
    Replace the first token with the alias value's tokens.
    One level only, so `alias ls=ls -l` does not loop.
    """
    if not tokens:
        return tokens
    value = table.get(tokens[0])
    if value is None:
        return tokens
    return value.split() + tokens[1:]
