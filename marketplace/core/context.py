# marketplace/core/context.py

import contextvars

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
account_id_ctx = contextvars.ContextVar("account_id", default=None)
