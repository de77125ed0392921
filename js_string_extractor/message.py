from dataclasses import dataclass


@dataclass
class Message:
    location: str
    comments: list
    payload: object
    origin: str


@dataclass
class CatalogEntry:
    key: str
    comments: list
    payload: object
    origin: str


def is_plural(payload):
    return type(payload) is tuple and len(payload) == 2 and \
        all(type(text) is str for text in payload)


def identity_key(payload):
    """
    The deduplication key of a payload: the string itself, or the plural
    pair joined with "|". None for anything that is not valid text.
    """
    if type(payload) is str:
        return payload
    if is_plural(payload):
        return "|".join(payload)
    return None


def code_units(comment):
    """Sort key comparing UTF-16 code units, as JavaScript string sort does."""
    return comment.encode("utf-16-be", "surrogatepass")


class Catalog:
    '''
    Messages of one run, merged by identity key in first-seen order
    '''
    def __init__(self):
        self.entries = {}

    def add(self, message):
        key = identity_key(message.payload)
        if key is None:
            # never merged, so the serializer reports every occurrence
            key = (message.origin, message.location)
        comments = [message.location] + message.comments

        if key not in self.entries:
            self.entries[key] = CatalogEntry(
                key, comments, message.payload, message.origin)
            return

        # later occurrences only contribute their comments
        entry = self.entries[key]
        entry.comments = sorted(entry.comments + comments,
                                key=code_units, reverse=True)

    def __iter__(self):
        return iter(self.entries.values())

    def __len__(self):
        return len(self.entries)

    def __contains__(self, key):
        return key in self.entries

    def __getitem__(self, key):
        return self.entries[key]
