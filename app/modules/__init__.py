"""Domain modules package."""

from app.modules.admin import models as admin_models  # noqa: F401
from app.modules.identity import models as identity_models  # noqa: F401
from app.modules.requests import models as requests_models  # noqa: F401
