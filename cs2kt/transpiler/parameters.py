"""Parameter list formatting."""

from collections.abc import Sequence

from cs2kt.transpiler.errors import TranspilerError
from cs2kt.transpiler.syntax import ParameterSyntax
from cs2kt.transpiler.type_translator import TypeTranslator


def format_parameter(parameter: ParameterSyntax, translator: TypeTranslator) -> str:
    """Format one parameter as 'name : Type', or the bare name when untyped.

    Raises:
        TranspilerError: If the parameter has no identifier
    """
    if not parameter.identifier:
        raise TranspilerError("Parameter without identifier", parameter)
    if parameter.type is None:
        return parameter.identifier
    return f"{parameter.identifier} : {translator.translate_syntax(parameter.type)}"


def format_parameter_list(
    parameters: Sequence[ParameterSyntax], translator: TypeTranslator
) -> str:
    """Format parameters in declaration order, joined with ', '."""
    return ", ".join(format_parameter(p, translator) for p in parameters)
