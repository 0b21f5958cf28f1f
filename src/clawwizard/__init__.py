"""ClawWizard - role-based onboarding wizard for OpenClaw workspaces.

Turns a short interview (role, goals, experience, tools) into a populated
workspace: config/clawdbot.yaml, AGENTS.md, HEARTBEAT.md, automation
definitions, skill scaffolds and a first morning brief.

Package entry point. Exports the version string only; functional modules
are imported lazily by main.py to keep startup fast.
"""

__version__ = "0.1.0"
