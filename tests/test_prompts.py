from jmath.services.prompts import (
    build_concept_map_prompt,
    build_explanation_prompt,
    build_similar_problems_prompt,
    build_solution_prompt,
)


def test_solution_prompt_embeds_problem_and_schema():
    prompt = build_solution_prompt("x^2 - 5x + 6 = 0")
    assert "Problem:\nx^2 - 5x + 6 = 0" in prompt
    assert '"solution"' in prompt
    assert '"step_number"' in prompt
    assert '"core_concept"' in prompt
    assert "Korean" in prompt
    assert "$inline$ or $$block$$" in prompt
    # worked example survives interpolation
    assert '"core_concept": "인수분해"' in prompt


def test_explanation_prompt_embeds_concept():
    prompt = build_explanation_prompt("인수분해")
    assert '"인수분해"' in prompt
    assert "Korean" in prompt
    assert "Markdown" in prompt


def test_similar_prompt_asks_for_three_problems():
    prompt = build_similar_problems_prompt("2x + 3 = 7")
    assert '"2x + 3 = 7"' in prompt
    assert '"similar_problems"' in prompt
    assert "3 similar problems" in prompt


def test_concept_map_prompt_joins_concepts():
    prompt = build_concept_map_prompt(["이차방정식의 표준형", "인수분해", "영인자 원리"])
    assert '"이차방정식의 표준형, 인수분해, 영인자 원리"' in prompt
    assert "graph TD" in prompt
    # Mermaid example braces are kept literally
    assert "D{해 구하기}" in prompt


def test_user_input_with_braces_is_interpolated_verbatim():
    problem = "Solve {x | x > {concept}}"
    assert problem in build_solution_prompt(problem)
