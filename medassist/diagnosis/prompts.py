"""
Prompt 模板。

纯字符串拼接，不对用户输入做任何转义：模型边界按"不可信文本进、不可信文本出"处理，
输出由 parsing.py 兜底。
"""

SYSTEM_PROMPT = (
    "You are a medical AI assistant. Provide helpful, accurate medical information "
    "while emphasizing the importance of consulting healthcare professionals."
)

JSON_ONLY = "Return only the JSON object, without markdown code fences or any extra text."


def build_symptom_prompt(symptoms, body_parts, severity, duration):
    """Build prompt for symptom-based diagnosis."""
    return f"""
As a medical AI assistant, analyze the following symptoms and provide a comprehensive diagnosis and treatment plan:

Symptoms: {symptoms}
Affected body parts: {', '.join(body_parts) if body_parts else 'Not specified'}
Severity: {severity or 'Not specified'}
Duration: {duration or 'Not specified'}

Please provide a structured response with:
1. Most likely condition name
2. Confidence percentage (0-100)
3. Brief description of the condition
4. 5 natural remedies with specific instructions
5. 5 healing foods and dietary recommendations
6. 3 recommended medications (over-the-counter)
7. 4 administration instructions
8. Important warning signs to watch for

Format the response as a JSON object with the following structure:
{{
  "condition": "condition name",
  "confidence": number,
  "description": "description",
  "naturalRemedies": ["remedy1", "remedy2", ...],
  "foods": ["food1", "food2", ...],
  "medications": ["med1", "med2", ...],
  "administration": ["instruction1", "instruction2", ...],
  "warning": "warning text"
}}

{JSON_ONLY}
"""


def build_treatment_prompt(condition, severity):
    """Build prompt for a phased treatment plan."""
    return f"""
Create a comprehensive treatment plan for: {condition} ({severity or 'unspecified'} severity)

Provide a detailed treatment plan with:
1. Lifecycle phases (3 phases with descriptions)
2. 6 natural remedies with specific instructions
3. 6 healing foods and dietary recommendations
4. 4 recommended medications
5. 5 recommended exercises
6. Daily schedule with 4 time-based activities
7. 4 prevention tips for future occurrences
8. Possible causes (3-4 causes)

Format as JSON:
{{
  "lifecyclePhases": {{
    "phase1": "description",
    "phase2": "description",
    "phase3": "description"
  }},
  "naturalRemedies": ["remedy1", ...],
  "foods": ["food1", ...],
  "medications": ["med1", ...],
  "exercises": ["exercise1", ...],
  "dailySchedule": [
    {{"time": "08:00", "activity": "activity", "type": "medication"}},
    ...
  ],
  "preventionTips": ["tip1", ...],
  "possibleCauses": ["cause1", ...]
}}

{JSON_ONLY}
"""


def build_photo_prompt(image_type, body_part):
    """Build prompt for photo / medical image analysis."""
    return f"""
As a medical AI assistant, analyze this medical image and provide a comprehensive diagnosis:

Image Type: {image_type or 'Not specified'}
Body Part: {body_part or 'Not specified'}

Please provide a structured response with:
1. Condition name and confidence percentage (0-100)
2. Brief description of findings
3. Severity level (mild, moderate, severe)
4. Whether anomaly is detected (true/false)
5. 5 natural remedies with specific instructions
6. 5 healing foods and dietary recommendations
7. 3 recommended medications with dosages
8. 4 exercises suitable for this condition
9. 4 administration instructions
10. Prevention strategies
11. Warning signs to watch for
12. Treatment plan phases

Format the response as a JSON object with the following structure:
{{
  "condition": "condition name",
  "confidence": number,
  "description": "description",
  "severity": "mild|moderate|severe",
  "anomalyDetected": boolean,
  "naturalRemedies": ["remedy1", "remedy2", ...],
  "foods": ["food1", "food2", ...],
  "medications": ["med1", "med2", ...],
  "exercises": ["exercise1", "exercise2", ...],
  "administration": ["instruction1", "instruction2", ...],
  "prevention": ["strategy1", "strategy2", ...],
  "warning": "warning text",
  "treatmentPlan": {{
    "phase1": "description",
    "phase2": "description",
    "phase3": "description"
  }}
}}

{JSON_ONLY}
"""


def build_article_prompt(topic):
    """Build prompt for a health education article."""
    return f"""
Write a comprehensive health education article about: {topic}

Include:
1. Detailed overview (2-3 paragraphs)
2. 6 key points with actionable advice
3. 5 natural treatments with specific instructions
4. Scientific evidence and recent research
5. Prevention strategies
6. When to seek medical attention

Format as JSON:
{{
  "title": "article title",
  "overview": "detailed overview text",
  "keyPoints": ["point1", "point2", ...],
  "naturalTreatments": ["treatment1", ...],
  "evidence": "scientific evidence text",
  "prevention": ["strategy1", ...],
  "seekHelp": "when to seek medical attention"
}}

{JSON_ONLY}
"""
