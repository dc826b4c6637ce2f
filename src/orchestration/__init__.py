"""
Orchestration Layer - Workflow Coordination

This layer coordinates running the exercises.
- Pure workflow coordination
- No exercise logic
- Composes transformation functions and collects their results
"""
