from app.services.voting.events import (
    create_voting_event,
    end_voting_event,
    get_active_voting_event,
    get_voting_event,
    list_voting_events,
    list_voting_events_by_type,
    update_voting_event,
)
from app.services.voting.records import (
    create_voting_record,
    delete_voting_record,
    list_records_for_event,
    list_voting_records,
)
from app.services.voting.tally import tally_voting_event

__all__ = [
    "create_voting_event",
    "end_voting_event",
    "get_active_voting_event",
    "get_voting_event",
    "list_voting_events",
    "list_voting_events_by_type",
    "update_voting_event",
    "create_voting_record",
    "delete_voting_record",
    "list_records_for_event",
    "list_voting_records",
    "tally_voting_event",
]
