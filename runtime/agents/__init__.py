"""
Agents used by the relay runtime.

For now there is a single AssistantRunner that:

- creates a remote assistant definition and thread per call
- submits the user's content and polls the run
- returns the assistant's reply text
"""
