"""
Static fixture data used to reset the database before each test case.

Each table is described by a SeedTable whose rows carry exactly the table's
columns. Ids are explicit so that the foreign keys in notes and notes_tags
line up with the folder, tag and note rows.
"""

from dataclasses import dataclass, astuple, fields
from typing import Optional, Tuple


@dataclass(frozen=True)
class FolderRecord:
    id: int
    name: str


@dataclass(frozen=True)
class TagRecord:
    id: int
    name: str


@dataclass(frozen=True)
class NoteRecord:
    id: int
    title: str
    content: str
    folder_id: Optional[int] = None


@dataclass(frozen=True)
class NoteTagRecord:
    note_id: int
    tag_id: int


@dataclass(frozen=True)
class SeedTable:
    """One table's fixture rows plus what the loader needs to reinsert them"""
    name: str
    record_type: type
    rows: Tuple
    serial_column: Optional[str] = "id"

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(self.record_type))

    def values(self):
        return [astuple(row) for row in self.rows]


_LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat."
)

FOLDERS = (
    FolderRecord(100, "Archive"),
    FolderRecord(101, "Drafts"),
    FolderRecord(102, "Personal"),
    FolderRecord(103, "Work"),
)

TAGS = (
    TagRecord(200, "foo"),
    TagRecord(201, "bar"),
    TagRecord(202, "baz"),
    TagRecord(203, "qux"),
)

NOTES = (
    NoteRecord(1000, "5 life lessons learned from cats", _LOREM, 100),
    NoteRecord(1001, "What the government doesn't want you to know about cats", _LOREM, 101),
    NoteRecord(1002, "The most boring article about cats you'll ever read", _LOREM, 102),
    NoteRecord(1003, "7 things lady gaga has in common with cats", _LOREM, 102),
    NoteRecord(1004, "The most incredible article about cats you'll ever read", _LOREM, 103),
    NoteRecord(1005, "10 ways cats can help you live to 100", _LOREM, 101),
    NoteRecord(1006, "9 reasons you can blame the recession on cats", _LOREM, None),
    NoteRecord(1007, "10 ways marketers are making you addicted to cats", _LOREM, 100),
    NoteRecord(1008, "11 ways investing in cats can make you a millionaire", _LOREM, 103),
    NoteRecord(1009, "Why you should forget everything you learned about cats", _LOREM, None),
)

NOTES_TAGS = (
    NoteTagRecord(1000, 200),
    NoteTagRecord(1000, 201),
    NoteTagRecord(1001, 200),
    NoteTagRecord(1002, 202),
    NoteTagRecord(1003, 201),
    NoteTagRecord(1003, 203),
    NoteTagRecord(1005, 200),
    NoteTagRecord(1007, 203),
    NoteTagRecord(1008, 202),
    NoteTagRecord(1008, 203),
)

FOLDERS_TABLE = SeedTable("folders", FolderRecord, FOLDERS)
TAGS_TABLE = SeedTable("tags", TagRecord, TAGS)
NOTES_TABLE = SeedTable("notes", NoteRecord, NOTES)
NOTES_TAGS_TABLE = SeedTable("notes_tags", NoteTagRecord, NOTES_TAGS, serial_column=None)

# Tables inside a phase have no dependency on each other
SEED_PHASES = (
    (FOLDERS_TABLE, TAGS_TABLE),
    (NOTES_TABLE,),
    (NOTES_TAGS_TABLE,),
)
