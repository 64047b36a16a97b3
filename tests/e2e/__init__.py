"""
End-to-end test package for the hosted Todo List app.

These tests drive a real browser against the public TechGlobal practice
site and demonstrate:
- Page Object Model (POM) pattern
- Scenario definitions shared between pytest and the todo-suite command
- Polling assertions instead of fixed sleeps
"""
