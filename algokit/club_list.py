"""Club membership list: the first member is president, the last secretary."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence


@dataclass
class Member:
    """A club member identified by PRN number."""

    prn: int
    name: str


class ClubList:
    """Ordered club members; president first, secretary last."""

    def __init__(self) -> None:
        self._members: list[Member] = []

    def _position(self, prn: int) -> Optional[int]:
        return next(
            (pos for pos, member in enumerate(self._members) if member.prn == prn),
            None,
        )

    def create(self, prn: int, name: str) -> Member:
        """Start the list with its first member."""
        if self._members:
            raise ValueError("List is already created.")
        member = Member(prn, name)
        self._members.append(member)
        return member

    def insert_president(self, prn: int, name: str) -> Member:
        """Add a member at the front; creates the list if empty."""
        if not self._members:
            return self.create(prn, name)
        member = Member(prn, name)
        self._members.insert(0, member)
        return member

    def insert_secretary(self, prn: int, name: str) -> Member:
        """Add a member at the end; creates the list if empty."""
        if not self._members:
            return self.create(prn, name)
        member = Member(prn, name)
        self._members.append(member)
        return member

    def insert_after(self, after_prn: int, prn: int, name: str) -> Member:
        """Add a member right after the member with after_prn."""
        position = self._position(after_prn)
        if position is None:
            raise ValueError(f"{after_prn} is not in list.")
        member = Member(prn, name)
        self._members.insert(position + 1, member)
        return member

    def delete_president(self) -> Member:
        """Remove and return the first member."""
        if not self._members:
            raise IndexError("Club is Empty..")
        return self._members.pop(0)

    def delete_secretary(self) -> Member:
        """Remove and return the last member."""
        if not self._members:
            raise IndexError("Club is Empty..")
        return self._members.pop()

    def delete_member(self, prn: int) -> Member:
        """Remove an ordinary member; president and secretary are protected."""
        if not self._members:
            raise IndexError("List/Club is empty")
        position = self._position(prn)
        if position is None or position == 0 or position == len(self._members) - 1:
            raise ValueError(
                "Member not found in List./president or secretary cannot be deleted."
            )
        return self._members.pop(position)

    def sort(self) -> None:
        """Order members by PRN number, keeping equal numbers in place."""
        self._members.sort(key=lambda member: member.prn)

    def concat(self, other: "ClubList") -> None:
        """Move all members of other to the end of this list."""
        if not other._members:
            raise ValueError("List 2 is empty")
        self._members.extend(other._members)
        other._members = []

    def reversed_members(self) -> list[Member]:
        """Members from secretary back to president."""
        return self._members[::-1]

    def render(self) -> str:
        """Text listing of the members, one per line."""
        if not self._members:
            return "List is Empty"
        lines = ["====== List: ======"]
        lines.extend(f"{member.prn}  {member.name}" for member in self._members)
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)


_MENU = (
    "\n1. create\n2.Insert President\n3.Insert secretary\n4.insert after position(member)"
    "\n5.Display list\n6.Delete President\n7.Delete Secretary\n8.Delete Member"
    "\n9.Find total No. of members\n10.Sort list\n11. Reselect List"
    "\n12.Combine lists\n13.Reverse Display\n0. Exit\nEnter your choice:\t"
)


def _read_member() -> tuple[int, str]:
    prn = int(input("Enter PRN number: "))
    name = input("Enter name: ").strip()
    return prn, name


def _select(lists: tuple[ClubList, ClubList]) -> Optional[ClubList]:
    while True:
        try:
            answer = input("\nSelect List\n1.List 1\n2.List 2\nEnter choice: ")
        except EOFError:
            return None
        if answer.strip() in ("1", "2"):
            return lists[int(answer) - 1]
        print("\nWrong list Number.")


def _run_choice(choice: int, club: ClubList, lists: tuple[ClubList, ClubList]) -> None:
    def show_reverse() -> None:
        for member in club.reversed_members():
            print(f"PRN NO:{member.prn} Name: {member.name}")

    def insert_after() -> None:
        after = int(input("Enter PRN No. after which to insert: "))
        club.insert_after(after, *_read_member())

    def delete_member() -> None:
        if not len(club):
            raise IndexError("List/Club is empty")
        prn = int(input("Enter PRN no. of member to be deleted: "))
        club.delete_member(prn)
        print(f"Member with prn no: {prn} is deleted.")

    def sort() -> None:
        club.sort()
        print("List is sorted.")
        print(club.render())

    def concat() -> None:
        lists[0].concat(lists[1])
        print("After concatenation")
        print(lists[0].render())

    actions: dict[int, Callable[[], None]] = {
        1: lambda: print(club.create(*_read_member())),
        2: lambda: print(f"Inserted {club.insert_president(*_read_member()).name}"),
        3: lambda: print(f"Inserted {club.insert_secretary(*_read_member()).name}"),
        4: insert_after,
        5: lambda: print(club.render()),
        6: lambda: print(f"President deleted: {club.delete_president().name}"),
        7: lambda: print(f"Secretary deleted: {club.delete_secretary().name}"),
        8: delete_member,
        9: lambda: print(
            f"Total members(including President & Secretary): {len(club)}"
        ),
        10: sort,
        12: concat,
        13: show_reverse,
    }
    action = actions.get(choice)
    if action is None:
        print("Wrong choice")
    else:
        action()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive club list menu on standard input."""
    del argv
    lists = (ClubList(), ClubList())
    club = _select(lists)
    while club is not None:
        try:
            answer = input(_MENU)
        except EOFError:
            break
        try:
            choice = int(answer)
        except ValueError:
            print("Wrong choice")
            continue
        if choice == 0:
            break
        if choice == 11:
            club = _select(lists)
            continue
        try:
            _run_choice(choice, club, lists)
        except (ValueError, IndexError) as error:
            print(error)
        except EOFError:
            break
    print("\n========== GOOD BYE ====================")
    return 0


if __name__ == "__main__":
    sys.exit(main())