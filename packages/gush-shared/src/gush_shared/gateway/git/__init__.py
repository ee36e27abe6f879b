"""Read-only git queries.

Import from submodules:
- abc: Git
- real: RealGit
- fake: FakeGit
"""
