"""People that accept visitors, and a visitor that describes them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


def _format_number(value: float) -> str:
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


class Visitor(ABC):
    """Something that does work on each kind of person."""

    @abstractmethod
    def client_info(self, client: Client) -> None:
        """Visit a client."""

    @abstractmethod
    def employee_info(self, employee: Employee) -> None:
        """Visit an employee."""


class Human(ABC):
    """A person who can be visited."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        """Hand this person to the matching method of ``visitor``."""


@dataclass
class Client(Human):
    name: str
    goods: list[str] = field(default_factory=list)

    def accept(self, visitor: Visitor) -> None:
        visitor.client_info(self)


@dataclass
class Employee(Human):
    name: str
    salary: float = 0.0

    def accept(self, visitor: Visitor) -> None:
        visitor.employee_info(self)


class Describer(Visitor):
    """Prints a description of each visited person."""

    def client_info(self, client: Client) -> None:
        print("Информация о клиенте:")
        print(f"Имя: {client.name}\nТовары: [{' '.join(client.goods)}]")

    def employee_info(self, employee: Employee) -> None:
        print("Информация о сотруднике:")
        print(
            f"Имя: {employee.name}\nЗарплата: {_format_number(employee.salary)}",
            end="",
        )


def run_visitor() -> None:
    """Describe a sample client and employee."""
    humans: list[Human] = [
        Client(name="Артем", goods=["Рыба", "Мясо", "Овощи"]),
        Employee(name="Иван", salary=15000),
    ]
    for human in humans:
        human.accept(Describer())


def main(argv: list[str] | None = None) -> int:
    run_visitor()
    return 0