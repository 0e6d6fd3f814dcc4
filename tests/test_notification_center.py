"""
Tests for NotificationCenter
"""

from src.models.notification import NotificationCategory, NotificationType
from src.services.local_store import LocalStore
from src.services.notification_center import NotificationCenter


def test_add_puts_newest_first(local_store):
    center = NotificationCenter(local_store)
    first = center.add("Planilha importada", "cronograma.xlsx")
    second = center.add("Tarefa atrasada", "Tarefa 2", NotificationType.WARNING, NotificationCategory.TASK)

    assert [n.id for n in center.notifications] == [second.id, first.id]
    assert center.unread_count == 2


def test_list_is_capped(local_store):
    center = NotificationCenter(local_store)
    for index in range(55):
        center.add(f"Aviso {index}", "mensagem")

    assert len(center.notifications) == 50
    assert center.notifications[0].title == "Aviso 54"
    assert center.notifications[-1].title == "Aviso 5"


def test_mark_as_read(local_store):
    center = NotificationCenter(local_store)
    first = center.add("A", "a")
    center.add("B", "b")

    center.mark_as_read(first.id)
    assert center.unread_count == 1

    center.mark_all_as_read()
    assert center.unread_count == 0


def test_clear(local_store):
    center = NotificationCenter(local_store)
    first = center.add("A", "a")
    center.add("B", "b")

    center.clear(first.id)
    assert [n.title for n in center.notifications] == ["B"]

    center.clear_all()
    assert center.notifications == []


def test_event_notifications_follow_settings(local_store):
    center = NotificationCenter(local_store)
    assert center.add_event_notification("Reunião", "Amanhã 09:00").category == NotificationCategory.EVENT

    center.update_settings(event_notifications=False)
    assert center.add_event_notification("Reunião", "Amanhã 10:00") is None
    assert len(center.notifications) == 1


def test_state_is_persisted(local_store):
    center = NotificationCenter(local_store)
    notification = center.add("A", "a")
    center.update_settings(push_notifications=False)

    reloaded = NotificationCenter(LocalStore(store_file=str(local_store.store_file)))

    assert [n.id for n in reloaded.notifications] == [notification.id]
    assert reloaded.settings.push_notifications is False
    assert reloaded.settings.event_notifications is True


def test_corrupt_notifications_are_reset(local_store):
    local_store.set("notifications", [{"title": "sem id"}])
    center = NotificationCenter(local_store)
    assert center.notifications == []
