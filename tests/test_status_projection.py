from datetime import datetime

from ticket_queue.services import status as status_service
from ticket_queue.services import tickets as tickets_service

DAY_ONE = datetime(2026, 3, 2, 9, 0, 0)
DAY_TWO = datetime(2026, 3, 3, 8, 30, 0)


def _join(db_session, count, now=DAY_ONE):
    return [
        tickets_service.create_ticket(db_session, f"Customer {index}", now=now)
        for index in range(count)
    ]


def _customer_status(db_session):
    status = status_service.get_customer_status(db_session, today=DAY_ONE.date())
    return status.current_number, status.queue_count


def test_empty_day(db_session):
    assert _customer_status(db_session) == (0, 0)
    stats = status_service.get_admin_stats(db_session, today=DAY_ONE.date())
    assert (stats.total, stats.queuing, stats.processed, stats.finished) == (0, 0, 0, 0)
    assert status_service.list_tickets(db_session, today=DAY_ONE.date()) == []


def test_nobody_called_yet(db_session):
    _join(db_session, 3)
    assert _customer_status(db_session) == (0, 3)


def test_falls_back_to_highest_finished(db_session):
    tickets = _join(db_session, 5)
    for ticket in (tickets[0], tickets[3], tickets[1]):
        tickets_service.update_status(db_session, ticket.id, "Finished")

    assert _customer_status(db_session) == (4, 2)


def test_lowest_processed_wins_over_finished(db_session):
    tickets = _join(db_session, 5)
    tickets_service.update_status(db_session, tickets[4].id, "Finished")
    tickets_service.update_status(db_session, tickets[3].id, "Processed")
    tickets_service.update_status(db_session, tickets[1].id, "Processed")

    assert _customer_status(db_session) == (2, 2)


def test_stats_stay_consistent(db_session):
    tickets = _join(db_session, 6)
    moves = [
        (0, "Processed"),
        (0, "Finished"),
        (1, "Processed"),
        (2, "Finished"),
        (2, "Queuing"),
        (3, "Finished"),
    ]
    for index, status in moves:
        tickets_service.update_status(db_session, tickets[index].id, status)
        stats = status_service.get_admin_stats(db_session, today=DAY_ONE.date())
        assert stats.total == stats.queuing + stats.processed + stats.finished == 6

    stats = status_service.get_admin_stats(db_session, today=DAY_ONE.date())
    assert (stats.queuing, stats.processed, stats.finished) == (3, 1, 2)


def test_other_days_are_ignored(db_session):
    _join(db_session, 2, now=DAY_TWO)
    tickets = _join(db_session, 3)
    tickets_service.update_status(db_session, tickets[0].id, "Processed")

    stats = status_service.get_admin_stats(db_session, today=DAY_ONE.date())
    assert stats.total == 3
    assert _customer_status(db_session) == (1, 2)


def test_list_is_newest_first_for_today(db_session):
    _join(db_session, 2, now=DAY_TWO)
    _join(db_session, 4)

    listed = status_service.list_tickets(db_session, today=DAY_ONE.date())

    assert [ticket.number for ticket in listed] == [4, 3, 2, 1]
    assert {ticket.day for ticket in listed} == {DAY_ONE.date()}
