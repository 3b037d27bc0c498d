from typing import List, Optional, Dict, Any


class Bookmark:
    def __init__(self, id: int, title: str, link: str, description: str = '', tags: Optional[List[str]] = None,
                 created: Optional[str] = None, updated: Optional[str] = None, state: str = 'open',
                 url: Optional[str] = None):
        self.id = id
        self.title = title
        self.link = link
        self.description = description
        self.tags = tags or []
        self.created = created
        self.updated = updated
        self.state = state
        self.url = url

    def matches(self, query: str) -> bool:
        query = query.lower()
        return any(query in field.lower() for field in (self.title, self.link, self.description))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'link': self.link,
            'description': self.description,
            'tags': list(self.tags),
            'created': self.created,
            'updated': self.updated,
            'state': self.state,
            'url': self.url,
        }

    def __eq__(self, other):
        if not isinstance(other, Bookmark):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # mutable; the cache replaces bookmarks in place
    __hash__ = None

    def __repr__(self):
        return f'<Bookmark {self.id}: {self.title}>'


class Tag:
    def __init__(self, name: str, color: str, description: Optional[str] = None):
        self.name = name
        self.color = color
        self.description = description

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'color': self.color}

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return (self.name, self.color, self.description) == (other.name, other.color, other.description)

    def __hash__(self):
        return hash((self.name, self.color, self.description))

    def __repr__(self):
        return f'<Tag {self.name}: #{self.color}>'
