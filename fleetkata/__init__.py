"""fleetkata — driver ratings and customer report lines.

Two small pure functions from a refactoring kata, with a CLI to try them.

Usage:
    python -m fleetkata list                                  # Show katas
    python -m fleetkata rating --late-deliveries 6            # Rate a driver
    python -m fleetkata report-lines --name Kaio --location Lisbon
"""
