"""In-process session store."""

from dataclasses import dataclass, field

from trip_quiz.services.interview import SessionStore


@dataclass
class InMemorySessionStore(SessionStore):
    """Session store keeping values in a dict under a namespace."""

    namespace: str = "trip_quiz"
    values: dict[str, str] = field(default_factory=dict)

    def load(self, key: str) -> str | None:
        return self.values.get(self._key(key))

    def save(self, key: str, value: str) -> None:
        self.values[self._key(key)] = value

    def clear(self) -> None:
        prefix = f"{self.namespace}:"
        for stored_key in [key for key in self.values if key.startswith(prefix)]:
            del self.values[stored_key]

    def _key(self, key: str) -> str:
        return f"{self.namespace}:{key}"
