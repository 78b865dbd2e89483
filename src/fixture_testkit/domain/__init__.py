"""Capability contracts the testkit depends on."""
