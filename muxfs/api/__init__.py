"""Userspace API over the multiplexed filesystem."""
