"""
Data Transfer Objects for invoice documents

Read-only views of the billing model. All amounts arrive already formatted;
nothing here parses or computes money.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, Optional, Union


@dataclass(frozen=True)
class NamedRecipient:
    """Recipient that exposes a display name"""
    
    name: str
    
    @property
    def display_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class AnonymousRecipient:
    """Recipient without a name; renders as an empty cell"""
    
    @property
    def display_name(self) -> str:
        return ''


Recipient = Union[NamedRecipient, AnonymousRecipient]


def resolve_recipient(obj: Any) -> Recipient:
    """
    Resolve an arbitrary recipient object to a Recipient variant.
    
    Never raises: objects without a ``name`` attribute (including None)
    become AnonymousRecipient.
    
    Args:
        obj: A Recipient, a model instance, or None
    
    Returns:
        NamedRecipient or AnonymousRecipient
    """
    if isinstance(obj, (NamedRecipient, AnonymousRecipient)):
        return obj
    if obj is None or not hasattr(obj, 'name'):
        return AnonymousRecipient()
    
    name = obj.name
    return NamedRecipient('' if name is None else str(name))


@dataclass(frozen=True)
class LineItem:
    """One billable entry, rendered as one table row"""
    
    description: str
    net_amount_formatted: str
    
    @classmethod
    def from_object(cls, obj: Any) -> 'LineItem':
        return cls(
            description=obj.description,
            net_amount_formatted=obj.net_amount_formatted,
        )


@dataclass(frozen=True)
class Invoice:
    """
    Immutable invoice view consumed by the document builder.
    
    ``line_items`` keeps input order; it is never sorted or deduplicated.
    """
    
    id: Any
    created_at: Optional[date]
    recipient: Recipient = field(default_factory=AnonymousRecipient)
    line_items: tuple[LineItem, ...] = ()
    net_amount_formatted: str = ''
    tax_amount_formatted: str = ''
    total_amount_formatted: str = ''
    
    def __post_init__(self):
        # Accept any iterable (lists, generators) but store a tuple
        object.__setattr__(self, 'line_items', tuple(self.line_items))
        object.__setattr__(self, 'recipient', resolve_recipient(self.recipient))
    
    @classmethod
    def from_object(cls, obj: Any) -> 'Invoice':
        """
        Build an Invoice view from a billing model instance.
        
        No validation happens here; a missing ``created_at`` only fails once
        the date is formatted.
        
        Args:
            obj: Object exposing id, created_at, recipient, line_items and
                the three *_amount_formatted attributes. ``line_items`` may
                be a plain iterable or a related manager.
        
        Returns:
            Invoice view
        """
        items = obj.line_items
        if callable(getattr(items, 'all', None)):
            items = items.all()
        
        return cls(
            id=obj.id,
            created_at=getattr(obj, 'created_at', None),
            recipient=resolve_recipient(getattr(obj, 'recipient', None)),
            line_items=_to_line_items(items),
            net_amount_formatted=obj.net_amount_formatted,
            tax_amount_formatted=obj.tax_amount_formatted,
            total_amount_formatted=obj.total_amount_formatted,
        )


def _to_line_items(items: Iterable[Any]) -> tuple[LineItem, ...]:
    return tuple(
        item if isinstance(item, LineItem) else LineItem.from_object(item)
        for item in items
    )
