"""Conversion between bookmarks and GitHub issues.

A bookmark is stored as an issue whose body carries the link and description
on prefixed lines. Tags are the issue's labels; the ``Tags:`` line written into
the body is for humans reading the issue on GitHub and is never parsed back.
"""
from typing import List, Dict, Any, Optional, Tuple

from ..models.bookmark import Bookmark, Tag

LINK_PREFIX = 'Link: '
DESCRIPTION_PREFIX = 'Description: '


def bookmark_to_issue_payload(title: str, link: str, description: Optional[str] = None,
                              tags: Optional[List[str]] = None) -> Dict[str, Any]:
    tags = list(tags or [])
    body = (f"{LINK_PREFIX}{link}\n\n"
            f"{DESCRIPTION_PREFIX}{description or ''}\n\n"
            f"Tags: {' '.join(tags)}")
    return {'title': title, 'body': body, 'labels': tags}


def parse_issue_body(body: Optional[str]) -> Tuple[str, str]:
    link = None
    description = None
    for line in (body or '').splitlines():
        if link is None and line.startswith(LINK_PREFIX):
            link = line[len(LINK_PREFIX):].strip()
        elif description is None and line.startswith(DESCRIPTION_PREFIX):
            description = line[len(DESCRIPTION_PREFIX):].strip()
    return link or '', description or ''


def issue_to_bookmark(issue: Dict[str, Any]) -> Bookmark:
    link, description = parse_issue_body(issue.get('body'))
    return Bookmark(
        id=int(issue['number']),
        title=issue.get('title') or '',
        link=link,
        description=description,
        tags=[_label_name(label) for label in issue.get('labels') or []],
        created=issue.get('created_at'),
        updated=issue.get('updated_at'),
        state=issue.get('state', 'open'),
        url=issue.get('html_url'),
    )


def label_to_tag(label: Dict[str, Any]) -> Tag:
    return Tag(name=label['name'], color=label.get('color', ''))


def _label_name(label) -> str:
    # GitHub returns label objects; plain names show up in some payload echoes
    if isinstance(label, dict):
        return label.get('name', '')
    return str(label)
