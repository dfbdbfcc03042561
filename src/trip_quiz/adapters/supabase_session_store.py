"""Supabase-backed session store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from trip_quiz.services.interview import SessionStore


@dataclass
class SupabaseSessionStore(SessionStore):
    """Supabase implementation storing one row per namespaced key."""

    client: Client
    namespace: str = "trip_quiz"
    table: str = "quiz_session_state"

    def load(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("namespace", self.namespace)
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def save(self, key: str, value: str) -> None:
        """Insert or replace the value for a key."""
        self.client.table(self.table).upsert(
            {
                "namespace": self.namespace,
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="namespace,key",
        ).execute()

    def clear(self) -> None:
        """Delete every key in the namespace."""
        self.client.table(self.table).delete().eq(
            "namespace", self.namespace
        ).execute()
