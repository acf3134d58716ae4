"""Records written to the two persistence stores."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class SummaryRecord:
    """Row for the Supabase `summaries` table."""

    url: str
    english_summary: str
    urdu_summary: str

    def to_dict(self):
        return {
            'url': self.url,
            'english_summary': self.english_summary,
            'urdu_summary': self.urdu_summary,
        }


@dataclass(frozen=True)
class FullTextRecord:
    """Document for the MongoDB `full_texts` collection."""

    url: str
    full_text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self):
        return {
            'url': self.url,
            'full_text': self.full_text,
            'timestamp': self.timestamp,
        }
