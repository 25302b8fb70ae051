"""
Prompt builders. Each returns a chat `messages` list ready for the LLM layer.
"""

import json
from typing import Optional

TUTOR_SYSTEM_PROMPT = """You are an expert AI tutor for AP Physics C, specializing in both Mechanics and Electricity & Magnetism. Your goal is to help high school students master the challenging concepts of AP Physics C.

Your tutoring style:
- Socratic method: instead of giving direct answers, guide students to the solution by asking probing questions. Help them break complex problems into smaller steps.
- Conceptual clarity: emphasize understanding of fundamental principles over memorized formulas.
- Problem solving: when a student presents a problem, walk them through the setup, the knowns and unknowns, the choice of equations, and the solution.
- Encouraging and patient: keep a positive tone. If a student is wrong, gently correct them and explain the underlying concept.
- Use LaTeX for all equations, variables and expressions, for example $F = ma$."""


def build_tutor_messages(history: list[dict], user_text: str) -> list[dict]:
    """history: prior turns as {"role": "user"|"model", "text": str}, oldest first."""
    messages = [{"role": "system", "content": TUTOR_SYSTEM_PROMPT}]
    for turn in history:
        if not turn.get("text"):
            continue
        role = "assistant" if turn["role"] == "model" else "user"
        messages.append({"role": role, "content": turn["text"]})
    messages.append({"role": "user", "content": user_text})
    return messages


# ─── Resource Suggestions ────────────────────────────────────────────────────

SEARCH_QUERY_SYSTEM_PROMPT = """You pick study resources for an AP Physics C student.
Given the student's message and the tutor's reply, list short search queries
(one to four words each, physics topic names only) for finding guide sheets,
videos and simulations about the topics discussed.

Respond with ONLY a JSON array of strings, no markdown. Use [] when nothing applies."""


def build_search_query_messages(user_text: str, reply: str, max_queries: int) -> list[dict]:
    context = f"""STUDENT: {user_text}

TUTOR: {reply}

Return at most {max_queries} queries."""
    return [
        {"role": "system", "content": SEARCH_QUERY_SYSTEM_PROMPT},
        {"role": "user", "content": context},
    ]


# ─── Question Generation ─────────────────────────────────────────────────────

def build_question_messages(topic: str, question_type: str, difficulty: str) -> list[dict]:
    is_mcq = question_type == "MCQ"
    fields = {
        "questionText": "The full question text, with LaTeX math",
        "explanation": "Detailed step-by-step solution, with LaTeX math",
    }
    if is_mcq:
        fields["choices"] = ["A) ...", "B) ...", "C) ...", "D) ..."]
        fields["correctChoice"] = "The correct choice, copied exactly from choices"
    else:
        fields["answer"] = "The final answer(s) for each part"

    shape_rule = (
        "Provide 4-5 choices with exactly one correct answer. Distractors should be "
        "plausible and target common misconceptions."
        if is_mcq else "Write a multi-part free response question."
    )

    prompt = f"""You are an expert AP Physics C tutor. Generate a high-quality, original practice question.

Parameters:
- Topic: {topic}
- Question Type: {question_type}
- Difficulty: {difficulty}

Content guidelines:
- The question should be at the AP Physics C level and realistic to the exam.
- {shape_rule}
- The explanation should be clear, concise, and give a step-by-step solution.
- Format math with LaTeX: $...$ inline and $$...$$ for block equations.
- Include relevant physics constants if needed.

Respond with ONLY a JSON object with these fields (no markdown, no other text):
{json.dumps(fields, indent=2)}"""
    return [{"role": "user", "content": prompt}]


# ─── Diagrams ────────────────────────────────────────────────────────────────

def build_diagram_messages(question_text: str) -> list[dict]:
    prompt = f"""You are a physics expert and an SVG artist. Create a simple, clean SVG diagram illustrating this AP Physics C problem.

Problem:
{question_text}

Instructions:
1. Identify the key objects, forces and interactions described.
2. Draw a 2D line-art diagram using basic shapes (circles, rectangles, lines, arrows).
3. No gradients, shadows or complex effects. Black for objects, blue for velocity vectors, red for force vectors, green for acceleration vectors.
4. Label important components with standard notation (m1, v, F_g, θ).
5. Output ONLY the SVG code, starting with <svg and ending with </svg>. Transparent background, with a viewBox that frames the content."""
    return [{"role": "user", "content": prompt}]


# ─── Problem Solver ──────────────────────────────────────────────────────────

def build_hint_messages(
    question_text: str,
    choices: Optional[list[str]],
    hint_index: int,
    scratchpad: str = "",
    previous_hints: Optional[list[str]] = None,
) -> list[dict]:
    step = hint_index + 1
    lines = [
        f"You are a physics tutor helping a student with an AP Physics C problem. "
        f"Generate a helpful hint for step {step} of solving this problem.",
        "",
        f"Problem: {question_text}",
    ]
    if choices:
        lines.append(f"Choices: {', '.join(choices)}")
    if scratchpad:
        lines.append(f"Student's work so far: {scratchpad}")
    if previous_hints:
        lines.append(f"Previous hints given: {' '.join(previous_hints)}")
    lines += [
        "",
        "Guidelines:",
        "- Give a specific, actionable hint for the next step",
        "- Don't give away the complete solution",
        "- Focus on the physics concepts and problem-solving approach",
        "- Be encouraging and keep it concise",
        "",
        f"Generate hint {step}:",
    ]
    return [{"role": "user", "content": "\n".join(lines)}]


def build_problem_chat_messages(
    message: str,
    question_text: str,
    choices: Optional[list[str]] = None,
    scratchpad: str = "",
) -> list[dict]:
    lines = [
        "You are an AI physics tutor helping a student with an AP Physics C problem. "
        "The student has asked you a question about their current problem.",
        "",
        f"Current Problem: {question_text}",
    ]
    if choices:
        lines.append(f"Answer Choices: {', '.join(choices)}")
    lines.append(f"Student's current work: {scratchpad}" if scratchpad else "No work shown yet")
    lines += [
        "",
        f"Student's Question: {message}",
        "",
        "Guidelines:",
        "- Guide the student to understand concepts rather than just giving answers",
        "- Ask clarifying questions if needed",
        "- Reference their work when relevant",
        "- Keep responses conversational but informative",
        "",
        "Respond to the student:",
    ]
    return [{"role": "user", "content": "\n".join(lines)}]
