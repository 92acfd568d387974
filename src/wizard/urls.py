SAVE_TRANSPORT_URL = "/api/wizard/transport"
