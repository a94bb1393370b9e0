"""Errors, tokens, types, scopes and the preprocessor of the T language compiler."""