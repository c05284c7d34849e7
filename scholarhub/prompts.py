"""
Centralized LLM prompts for the AI summary feature.
"""

# ============================================================================
# SUMMARY INSTRUCTIONS
# ============================================================================

DEFAULT_SUMMARY_INSTRUCTION = "Summarize this information concisely:"

SCHOLARSHIP_SUMMARY_INSTRUCTION = (
    "Provide a compelling, student-focused summary of this scholarship, "
    "highlighting key benefits and requirements. Keep it under 100 words."
)

UNIVERSITY_SUMMARY_INSTRUCTION = (
    "Provide a concise summary for prospective students about this university, "
    "highlighting its key features and programs. Keep it under 100 words."
)

# ============================================================================
# CONTEXT TEMPLATES
# ============================================================================

SCHOLARSHIP_CONTEXT = """Scholarship Name: {name}
Description: {description}
Country: {country}
Budget: {budget}
Major: {major}
Deadline: {deadline}
Organization: {organization}"""

UNIVERSITY_CONTEXT = """University Name: {name}
Country: {country}
Programs Offered: {programs}"""

SUMMARY_PROMPT = """{instruction}

{context}"""
