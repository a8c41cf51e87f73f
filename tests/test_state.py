from l2utils.state import Canceled, Delivery, Order, Ready, run_state

DELIVERED = "Заказ доставлен на пункт выдачи"
WAITING = "Заказ ожидает на пункте выдачи"
FINE = "Штраф за отмену заказа"
BLOCKED = "Невозможно выполнить операцию, заказ был отменен"


def test_new_order_is_in_delivery():
    order = Order()
    assert isinstance(order.state, Delivery)
    assert order.blocked is False


def test_next_from_delivery_makes_ready(capsys):
    order = Order()
    order.next()
    assert isinstance(order.state, Ready)
    assert capsys.readouterr().out == DELIVERED + "\n"


def test_ready_next_stays_ready(capsys):
    order = Order(state=Ready())
    order.next()
    assert isinstance(order.state, Ready)
    assert capsys.readouterr().out == WAITING + "\n"


def test_cancel_from_delivery(capsys):
    order = Order()
    order.cancel()
    assert isinstance(order.state, Canceled)
    assert order.blocked is True
    assert capsys.readouterr().out == ""


def test_cancel_twice_stays_canceled(capsys):
    order = Order(state=Ready())
    order.cancel()
    assert order.cancel() is None
    assert isinstance(order.state, Canceled)
    assert order.blocked is True
    assert capsys.readouterr().out == ""


def test_next_after_cancel_reports_block(capsys):
    order = Order(state=Ready())
    order.cancel()
    order.next()
    assert capsys.readouterr().out == FINE + "\n" + BLOCKED + "\n"


def test_run_state(capsys):
    run_state()
    assert capsys.readouterr().out.splitlines() == [DELIVERED, FINE, BLOCKED]