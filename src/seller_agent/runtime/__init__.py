"""Collaborators the seller runs against: clock, scheduler, notifier, transport."""
