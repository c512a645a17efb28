"""
Nested card lookup: language -> set -> name -> printing(s)
"""
import abc
from typing import (
    AbstractSet,
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
)

CardRecord = Dict[str, Any]
IndexEntry = Tuple[str, str, str, Optional[str], CardRecord]


class SetEntry(abc.ABC):
    """
    Cards of one set in one language
    """

    cards: Dict[str, Any]

    def __init__(self) -> None:
        self.cards = {}

    @abc.abstractmethod
    def insert(
        self, name: str, collector_number: Optional[str], record: CardRecord
    ) -> None:
        """
        Store a record under a card name
        :param name: Card (or face) name
        :param collector_number: Printing within the set
        :param record: Card record to keep
        """

    @abc.abstractmethod
    def get(
        self, name: str, collector_number: Optional[str] = None
    ) -> Optional[CardRecord]:
        """
        Fetch a stored record
        :param name: Card (or face) name
        :param collector_number: Printing within the set
        :return: Record, if stored
        """

    @abc.abstractmethod
    def items(self) -> Iterator[Tuple[str, Optional[str], CardRecord]]:
        """
        Every stored (name, collector number, record)
        """

    def __len__(self) -> int:
        return sum(1 for _ in self.items())

    def to_json(self) -> Dict[str, Any]:
        """
        Plain dict form of the entry
        """
        return dict(self.cards)


class SingletonSetEntry(SetEntry):
    """
    One record per card name, the latest insert wins.
    Used for sets where extra printings only differ by art.
    """

    cards: Dict[str, CardRecord]

    def insert(
        self, name: str, collector_number: Optional[str], record: CardRecord
    ) -> None:
        self.cards[name] = record

    def get(
        self, name: str, collector_number: Optional[str] = None
    ) -> Optional[CardRecord]:
        return self.cards.get(name)

    def items(self) -> Iterator[Tuple[str, Optional[str], CardRecord]]:
        for name, record in self.cards.items():
            yield name, None, record


class PrintingsSetEntry(SetEntry):
    """
    Every printing of a card name, keyed by collector number
    """

    cards: Dict[str, Dict[Optional[str], CardRecord]]

    def insert(
        self, name: str, collector_number: Optional[str], record: CardRecord
    ) -> None:
        self.cards.setdefault(name, {})[collector_number] = record

    def get(
        self, name: str, collector_number: Optional[str] = None
    ) -> Optional[CardRecord]:
        printings = self.cards.get(name)
        if not printings:
            return None
        return printings.get(collector_number)

    def items(self) -> Iterator[Tuple[str, Optional[str], CardRecord]]:
        for name, printings in self.cards.items():
            for collector_number, record in printings.items():
                yield name, collector_number, record

    def to_json(self) -> Dict[str, Any]:
        return {name: dict(printings) for name, printings in self.cards.items()}


class CardIndex:
    """
    All indexed cards of a build, grouped by language then set.
    Set entries are created on first insert and never removed.
    """

    single_art_sets: AbstractSet[str]
    __languages: Dict[str, Dict[str, SetEntry]]

    def __init__(self, single_art_sets: Iterable[str] = ()) -> None:
        self.single_art_sets = frozenset(single_art_sets)
        self.__languages = {}

    def insert(
        self,
        record: CardRecord,
        language: str,
        set_code: str,
        name: str,
        collector_number: Optional[str],
    ) -> None:
        """
        Add a record to the index
        :param record: Card record to store
        :param language: Language code, as stored
        :param set_code: Scryfall set code
        :param name: Card (or face) name
        :param collector_number: Printing within the set
        """
        sets = self.__languages.setdefault(language, {})
        set_entry = sets.get(set_code)
        if set_entry is None:
            set_entry = self.__new_set_entry(set_code)
            sets[set_code] = set_entry

        set_entry.insert(name, collector_number, record)

    def get(
        self,
        language: str,
        set_code: str,
        name: str,
        collector_number: Optional[str] = None,
    ) -> Optional[CardRecord]:
        """
        Look up a single record
        :param language: Language code
        :param set_code: Scryfall set code
        :param name: Card (or face) name
        :param collector_number: Ignored for single art sets
        :return: Record, if indexed
        """
        set_entry = self.__languages.get(language, {}).get(set_code)
        if set_entry is None:
            return None
        return set_entry.get(name, collector_number)

    def set_entry(self, language: str, set_code: str) -> Optional[SetEntry]:
        """
        Storage of one set in one language, if it has cards
        """
        return self.__languages.get(language, {}).get(set_code)

    def languages(self) -> List[str]:
        """
        Languages with at least one card, in insertion order
        """
        return list(self.__languages)

    def sets(self, language: str) -> List[str]:
        """
        Set codes indexed for a language
        """
        return list(self.__languages.get(language, {}))

    def entries(self) -> Iterator[IndexEntry]:
        """
        Walk every stored record
        :return: (language, set, name, collector number, record) tuples,
        collector number is None for single art sets
        """
        for language, sets in self.__languages.items():
            for set_code, set_entry in sets.items():
                for name, collector_number, record in set_entry.items():
                    yield language, set_code, name, collector_number, record

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """
        Nested plain dict form, as handed to the metadata generator
        """
        return {
            language: {
                set_code: set_entry.to_json() for set_code, set_entry in sets.items()
            }
            for language, sets in self.__languages.items()
        }

    def to_json(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """
        Serializer hook for json.dump(default=...)
        """
        return self.to_dict()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) not in (3, 4):
            return False
        return self.get(*key) is not None

    def __len__(self) -> int:
        return sum(
            len(set_entry)
            for sets in self.__languages.values()
            for set_entry in sets.values()
        )

    def __new_set_entry(self, set_code: str) -> SetEntry:
        if set_code in self.single_art_sets:
            return SingletonSetEntry()
        return PrintingsSetEntry()
