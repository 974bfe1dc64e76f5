"""Admin control panel: contact preference reconciliation and role management."""
