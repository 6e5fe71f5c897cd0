"""System prompts for the AI features."""

CLASSIFY_PROMPT = """
You are given the text of a web page. Decide which ONE of these categories it belongs to:
job, scholarship, blog, news, technical, other.

Then extract the fields for that category and answer with a single JSON object of the form
{"type": "<category>", "data": {...}}. Use null for unknown optional values, ISO 8601 for dates,
and never invent facts that are not in the text.

job (a job posting):
- company_title, job_position, job_location
- job_type: one of "contract", "full time", "part time"
- workplace: one of "remote", "on-site", "hybrid"
- due_date, tech_stack (array), responsibilities (array)
- professional_experience (years, integer), requirements (array)
- additional_skills (array), company_culture

scholarship (a scholarship or university admission call):
- title, organization, amount, deadline
- eligibility (array), requirements (array), field_of_study (array), degree_level (array)
- country, link, status: one of "active", "expired", "upcoming"
- additional_info (object)

blog (an opinion piece, story or article):
- title, author, publication_date, source, summary
- key_points (array), topics_covered (array), target_audience, tags (array)
- sentiment: one of "positive", "negative", "neutral"
- complexity: one of "basic", "intermediate", "advanced"
- readability_score (0-100)

news (a news report): every blog field, plus category, is_breaking (boolean) and region.

technical (documentation, tutorials, reference material):
- title, author, publication_date, source, technology
- complexity_level: one of "beginner", "intermediate", "advanced"
- code_snippets (array), prerequisites (array), target_audience, tags (array)
- sentiment, content_type (e.g. "tutorial", "reference", "guide"), readability_score (0-100)

other (anything else):
- title, content_type, author, publication_date, source, summary
- key_points (array), topics_covered (array), target_audience, tags (array)
- sentiment, complexity, readability_score (0-100)
- content_details (object with whatever structured facts the page holds)

Return only the JSON object.
""".strip()

SUMMARIZE_PROMPT = """
Summarize the following text. Respond with only a JSON object with these keys:
- "summary": a concise paragraph covering the main points
- "key_points": an array of short strings, one per main point
- "word_count": an object {"original": <words in the input>, "summary": <words in the summary>}
""".strip()

JOB_ANALYSIS_PROMPT = """
The following text is a job posting. Respond with only a JSON object with these keys:
company_title, job_position, job_location, job_type ("contract", "full time" or "part time"),
workplace ("remote", "on-site" or "hybrid"), due_date, tech_stack (array),
responsibilities (array), professional_experience (years, integer), requirements (array),
additional_skills (array), company_culture. Use null when a value is not stated.
""".strip()

SUMMARY_HTML_PROMPT = (
    "Summarize the following long blog post into a quick overview that captures all the "
    "main points and subjects discussed. The summary should be comprehensive yet concise, "
    "allowing a blog reader to quickly grasp the content. Keep the summary between 300 and "
    "500 characters. Only generate HTML for the content. Respond with the HTML snippet and "
    "nothing else."
)

DETAILED_OVERVIEW_PROMPT = (
    "Generate a detailed summary of the following long blog post. The summary should "
    "provide comprehensive coverage of all the main points and subjects discussed, offering "
    "readers a thorough understanding of the content. Aim for a length of around 800 to 1000 "
    "characters. Only generate HTML for the content. Respond with the HTML snippet and "
    "nothing else."
)

HTML_TO_TEXT_PROMPT = (
    "Extract the meaningful text from the following HTML. Drop navigation, scripts, styles "
    "and boilerplate. Respond with plain text only."
)
