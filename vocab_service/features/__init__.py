"""Feature modules (subscriptions, words, notifications)."""
