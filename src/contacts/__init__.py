"""
Contacts API package.

Create/read/update/delete operations over contact records held in an
in-memory store. The store is owned by the application instance and handed
to the route handlers through a dependency, so each app (and each test
client) works on its own collection.
"""

from .router import router  # noqa: F401
from .store import ContactStore, SAMPLE_CONTACTS  # noqa: F401
