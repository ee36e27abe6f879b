"""Process gateway for running command lines and reporting their outcome.

Import from submodules:
- abc: Process
- types: CommandOutcome
- real: RealProcess
- fake: FakeProcess
"""
