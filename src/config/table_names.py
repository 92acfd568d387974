from enum import Enum


class TableNames(str, Enum):
    USERS = "users"
    EVENTS = "wedding_events"
    CEREMONIES = "ceremonies"
    GUESTS = "guests"
    GUEST_CEREMONIES = "guest_ceremonies"
