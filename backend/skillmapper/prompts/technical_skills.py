"""
Technical Skills Prompt — the core technical skills for a role.

Used by jd_service.py → llm_service.complete_json()
"""

SYSTEM_PROMPT = """You list the technical skills a role requires.

CRITICAL: Base the answer only on the given job role and experience level.

You MUST respond with valid JSON only — no markdown, no explanation, no preamble.

Output format:

{
  "technicalSkills": ["most important technical skills for this role"]
}

Rules:
1. Technologies, programming languages, frameworks, tools and core technical concepts only
2. Do NOT include soft skills such as communication or teamwork
"""

USER_PROMPT_TEMPLATE = """Job Role: {role}
Experience Level: {experience}"""
