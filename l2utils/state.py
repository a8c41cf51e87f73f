"""An order whose behaviour depends on the state it is in."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class OrderState(ABC):
    @abstractmethod
    def next(self, order: Order) -> None:
        """Move the order forward."""

    @abstractmethod
    def cancel(self, order: Order) -> None:
        """Cancel the order."""


class Delivery(OrderState):
    def next(self, order: Order) -> None:
        print("Заказ доставлен на пункт выдачи")
        order.state = Ready()

    def cancel(self, order: Order) -> None:
        order.state = Canceled()


class Ready(OrderState):
    def next(self, order: Order) -> None:
        print("Заказ ожидает на пункте выдачи")

    def cancel(self, order: Order) -> None:
        order.state = Canceled()


class Canceled(OrderState):
    def next(self, order: Order) -> None:
        print("Штраф за отмену заказа")

    def cancel(self, order: Order) -> None:
        pass


@dataclass
class Order:
    state: OrderState = field(default_factory=Delivery)
    blocked: bool = False

    def next(self) -> None:
        self.state.next(self)
        if self.blocked:
            print("Невозможно выполнить операцию, заказ был отменен")

    def cancel(self) -> None:
        self.state.cancel(self)
        self.blocked = True


def run_state() -> None:
    """Deliver a sample order, cancel it and try to move it on."""
    order = Order()
    order.next()
    order.cancel()
    order.next()