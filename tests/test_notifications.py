from __future__ import annotations

from textual_todo.notifications import NotificationController


def test_show_and_dismiss() -> None:
    controller = NotificationController()
    assert controller.visible is False
    assert controller.message == ""

    controller.show("hello")
    assert controller.visible is True
    assert controller.message == "hello"

    controller.dismiss()
    assert controller.visible is False
    assert controller.message == "hello"


def test_show_overwrites_without_queueing() -> None:
    controller = NotificationController()
    controller.show("first")
    controller.show("second")
    assert controller.message == "second"

    controller.dismiss()
    assert controller.visible is False


def test_listeners_follow_changes_and_can_unsubscribe() -> None:
    controller = NotificationController()
    seen = []
    unsubscribe = controller.subscribe(lambda c: seen.append((c.message, c.visible)))

    controller.show("a")
    controller.dismiss()
    controller.dismiss()  # already hidden: no event
    unsubscribe()
    controller.show("b")

    assert seen == [("a", True), ("a", False)]


def test_failing_listener_does_not_block_others() -> None:
    controller = NotificationController()
    seen = []

    def broken(_: NotificationController) -> None:
        raise RuntimeError("boom")

    controller.subscribe(broken)
    controller.subscribe(lambda c: seen.append(c.message))
    controller.show("still delivered")
    assert seen == ["still delivered"]
