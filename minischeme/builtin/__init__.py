from minischeme.builtin.env_builtin import BUILTINS, register, standard_environment

__all__ = ["BUILTINS", "register", "standard_environment"]
