# Venues API — Database Models
# Import all models here for SQLAlchemy discovery

from venues.models.place import Place            # noqa
from venues.models.gate import Gate              # noqa
from venues.models.turnstile import Turnstile    # noqa
from venues.models.event import Event            # noqa
