"""
GLSL/HLSL code generator for Chebyshev expansions.

Classic shader dialects restrict loops that index arrays of literals, so
this backend unrolls the Clenshaw recurrence at generation time into
straight-line assignments, one accumulator per step:

    float d_i4 = 0.0f;
    float d_i3 = 0.0f;
    float d_i2 = c2;  // i = 2
    float d_i1 = xRel2 * d_i2 + c1;  // i = 1
    return 0.5f * xRel2 * d_i1 - d_i2 + (0.5f * c0);

All floating values are written with a fixed number of fractional digits
and an explicit "f" suffix.

A disabled (#if 0) ShaderToy snippet plotting the function is appended.
"""

from typing import List

from chebgen.expansion import ChebyshevExpansion
from chebgen.literals import fixed_single
from chebgen.recurrence import StepKind, UnrolledStep, unrolled_steps
from chebgen.comments import (
    coefficients_comment_lines,
    eval_function_comment_lines,
    comment_block,
)


COMMENT = "//"
SHADER_FRACTION_DIGITS = 10


def _step_line(step: UnrolledStep) -> str:
    """Render one unrolled accumulator assignment."""
    i = step.index
    if step.kind == StepKind.ZERO:
        return f"    float d_i{i} = 0.0f;"
    if step.kind == StepKind.LEADING:
        return f"    float d_i{i} = c{i};  // i = {i}"
    if step.kind == StepKind.SECOND:
        return f"    float d_i{i} = xRel2 * d_i{i + 1} + c{i};  // i = {i}"
    return f"    float d_i{i} = xRel2 * d_i{i + 1} + c{i} - d_i{i + 2};  // i = {i}"


def _shadertoy_lines(x_min: str, x_max: str) -> List[str]:
    return [
        "#if 0",
        "// ShaderToy compatible function",
        "void mainImage( out vec4 fragColor, in vec2 fragCoord )",
        "{",
        f"    const float xMin = {x_min};",
        f"    const float xMax = {x_max};",
        "",
        "    vec2 uv;",
        "    uv.x = (fragCoord.x - iResolution.x * 0.5f) / iResolution.y + 0.5f;",
        "    uv.y =  fragCoord.y                         / iResolution.y;",
        "",
        "    vec3 c = vec3(0.8f);",
        "    float x = uv.x * (xMax - xMin) + xMin;",
        "    if(x >= xMin && x <= xMax) {",
        "        float delta = chebyshevEval(x) * 0.5f + 0.5f - fragCoord.y / iResolution.y;",
        "        c *= clamp(abs(delta * iResolution.y), 0.0f, 1.0f);",
        "    }",
        "    fragColor = vec4(c, 1.0);",
        "}",
        "#endif",
    ]


def generate_glsl_hlsl_code(
    expansion: ChebyshevExpansion,
    fraction_digits: int = SHADER_FRACTION_DIGITS,
) -> str:
    """
    Generate an unrolled GLSL/HLSL evaluator for the expansion.

    Args:
        expansion: Expansion to render (validated by the caller)
        fraction_digits: Fractional digits of every float literal

    Returns:
        Shader source text defining `float chebyshevEval(float x)`
    """
    x_min = fixed_single(expansion.x_min, fraction_digits)
    x_max = fixed_single(expansion.x_max, fraction_digits)

    lines: List[str] = []

    lines.extend(comment_block(eval_function_comment_lines(), COMMENT))
    lines.append("float chebyshevEval(float x) {")

    lines.extend(comment_block(coefficients_comment_lines(expansion), COMMENT, indent="    "))
    for i, c in enumerate(expansion.coeffs):
        lines.append(f"    const float c{i} = {fixed_single(c, fraction_digits)};")
    lines.append("")
    lines.append(f"    const float xMin = {x_min};")
    lines.append(f"    const float xMax = {x_max};")
    lines.append("    const float k    = 1.0f / (xMax - xMin);")
    lines.append("    const float a    = 4.0f * k;")
    lines.append("    const float b    = -4.0f * xMin * k - 2.0f;")
    lines.append("")
    lines.append("    float xRel2 = a * x + b;")
    lines.append("")
    lines.extend(_step_line(step) for step in unrolled_steps(expansion.num_coeffs))
    lines.append("    return 0.5f * xRel2 * d_i1 - d_i2 + (0.5f * c0);")
    lines.append("}")
    lines.append("")
    lines.extend(_shadertoy_lines(x_min, x_max))

    return "\n".join(lines)
