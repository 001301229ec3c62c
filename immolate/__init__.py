"""Seeded prediction of shops, packs, vouchers and decks for a poker roguelike."""

__version__ = "0.1.0"