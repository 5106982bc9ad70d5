from dataclasses import dataclass, field
from typing import List, Optional

FORM_FIELDS = ('topic', 'date', 'start_time', 'end_time', 'participants')
REQUIRED_FIELDS = ('topic', 'date', 'start_time', 'end_time')

@dataclass
class Meeting:
    topic: str = ''
    date: str = ''        # YYYY-MM-DD
    start_time: str = ''  # HH:MM
    end_time: str = ''    # HH:MM
    participants: List[str] = field(default_factory=list)
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data):
        """Build a meeting from an API record, ignoring unknown keys."""
        return cls(
            topic=data.get('topic') or '',
            date=data.get('date') or '',
            start_time=data.get('start_time') or '',
            end_time=data.get('end_time') or '',
            participants=list(data.get('participants') or []),
            id=data.get('id'),
        )

    def to_payload(self):
        """JSON body for create/update requests. No id on create."""
        payload = {
            'topic': self.topic,
            'date': self.date,
            'start_time': self.start_time,
            'end_time': self.end_time,
            'participants': list(self.participants),
        }
        if self.id is not None:
            payload['id'] = self.id
        return payload

    def participants_text(self):
        return ', '.join(self.participants)

    def copy(self):
        return Meeting(
            topic=self.topic,
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
            participants=list(self.participants),
            id=self.id,
        )

def empty_draft():
    return Meeting()
