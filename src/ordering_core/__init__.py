"""Ordering core - place orders by delegating payment to a collaborator."""
