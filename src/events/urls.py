LIST_EVENT_GUESTS_URL = "/api/events/{event_id}/guests"
