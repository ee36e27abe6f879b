"""Interactive prompt gateway.

Import from submodules:
- abc: Prompter
- types: ValidationError, InputExhausted, Validator, PromptCall
- attempts: ask_with_attempts
- real: RealPrompter
- fake: FakePrompter
"""
