"""Event type names of the chat stream wire protocol."""

TOKEN = "token"
CV_UPDATE = "cv_update"
DONE = "done"
ERROR = "error"
