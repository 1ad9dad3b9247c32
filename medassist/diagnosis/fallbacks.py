"""
固定兜底内容。

两类：
  text_fallback_* / fallback_*: 模型返回了内容但不是可解析的 JSON 时使用，
                                 description / overview 取原始文本的前 N 个字符。
  demo_*                      : 没有配置任何 API key 时 API 层展示的演示内容。

每次调用都返回新对象，调用方可以随意修改。
"""

from .types import (
    SOURCE_DEMO,
    SOURCE_TEXT_FALLBACK,
    Diagnosis,
    HealthArticle,
    ScheduleEntry,
    TreatmentPhases,
    TreatmentPlan,
)

DIAGNOSIS_LABEL = "AI-Generated Diagnosis"
PHOTO_DIAGNOSIS_LABEL = "AI-Generated Photo Diagnosis"
DIAGNOSIS_CONFIDENCE = 75
PHOTO_DIAGNOSIS_CONFIDENCE = 78
GENERIC_WARNING = "Consult a healthcare professional if symptoms persist or worsen."
PHOTO_WARNING = "Seek immediate medical attention if symptoms worsen or persist."

DESCRIPTION_LIMIT = 200
OVERVIEW_LIMIT = 300


def excerpt(text, limit):
    text = (text or "").strip()
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def default_phases():
    return TreatmentPhases(
        phase1="Immediate relief and symptom management (Days 1-3)",
        phase2="Active treatment and healing phase (Days 4-7)",
        phase3="Recovery and prevention phase (Week 2+)",
    )


# ── 文本兜底 ───────────────────────────────────────────────────────────────

def text_fallback_diagnosis(text):
    return Diagnosis(
        condition=DIAGNOSIS_LABEL,
        confidence=DIAGNOSIS_CONFIDENCE,
        description=excerpt(text, DESCRIPTION_LIMIT),
        natural_remedies=[
            "Rest and adequate sleep",
            "Stay hydrated with water",
            "Apply warm or cold compress",
            "Practice stress reduction",
            "Maintain healthy diet",
        ],
        foods=[
            "Fresh fruits and vegetables",
            "Lean proteins",
            "Whole grains",
            "Anti-inflammatory foods",
            "Plenty of fluids",
        ],
        medications=[
            "Over-the-counter pain relievers as needed",
            "Consult pharmacist for recommendations",
            "Follow package instructions",
        ],
        administration=[
            "Take medications with food",
            "Follow recommended dosages",
            "Monitor symptoms closely",
            "Seek medical attention if worsening",
        ],
        warning=GENERIC_WARNING,
        source=SOURCE_TEXT_FALLBACK,
    )


def text_fallback_photo_diagnosis(text):
    return Diagnosis(
        condition=PHOTO_DIAGNOSIS_LABEL,
        confidence=PHOTO_DIAGNOSIS_CONFIDENCE,
        description=excerpt(text, DESCRIPTION_LIMIT),
        severity="moderate",
        anomaly_detected=True,
        natural_remedies=[
            "Apply cool compresses to affected area",
            "Use natural anti-inflammatory remedies",
            "Maintain proper hygiene",
            "Get adequate rest",
            "Stay hydrated",
        ],
        foods=[
            "Anti-inflammatory foods",
            "Fresh fruits and vegetables",
            "Lean proteins",
            "Whole grains",
            "Healthy fats",
        ],
        medications=[
            "Over-the-counter pain relief",
            "Topical treatments",
            "Anti-inflammatory medications",
        ],
        exercises=[
            "Gentle stretching",
            "Light walking",
            "Breathing exercises",
            "Range of motion activities",
        ],
        administration=[
            "Take medications with food",
            "Apply treatments as directed",
            "Monitor symptoms closely",
            "Follow up with healthcare provider",
        ],
        prevention=[
            "Maintain good hygiene",
            "Avoid known triggers",
            "Regular health checkups",
            "Healthy lifestyle habits",
        ],
        warning=PHOTO_WARNING,
        treatment_plan=default_phases(),
        source=SOURCE_TEXT_FALLBACK,
    )


def fallback_treatment_plan():
    return TreatmentPlan(
        lifecycle_phases=TreatmentPhases(
            phase1="Immediate relief and symptom management",
            phase2="Active treatment and healing",
            phase3="Recovery and prevention",
        ),
        natural_remedies=[
            "Rest and adequate sleep",
            "Stress reduction techniques",
            "Natural anti-inflammatory foods",
            "Gentle exercise as tolerated",
            "Hydration therapy",
            "Herbal remedies as appropriate",
        ],
        foods=[
            "Anti-inflammatory foods",
            "Fresh fruits and vegetables",
            "Lean proteins",
            "Whole grains",
            "Healthy fats",
            "Adequate hydration",
        ],
        medications=[
            "Over-the-counter pain relief",
            "Anti-inflammatory medications",
            "Topical treatments",
            "Supplements as recommended",
        ],
        exercises=[
            "Gentle stretching",
            "Light walking",
            "Breathing exercises",
            "Range of motion activities",
            "Gradual activity increase",
        ],
        daily_schedule=[
            ScheduleEntry("08:00", "Morning medication and breakfast", "medication"),
            ScheduleEntry("12:00", "Healthy lunch and light exercise", "nutrition"),
            ScheduleEntry("18:00", "Evening medication", "medication"),
            ScheduleEntry("21:00", "Relaxation and preparation for sleep", "wellness"),
        ],
        prevention_tips=[
            "Maintain healthy lifestyle",
            "Regular exercise routine",
            "Stress management",
            "Adequate sleep",
        ],
        possible_causes=[
            "Lifestyle factors",
            "Environmental triggers",
            "Genetic predisposition",
            "Previous injuries or conditions",
        ],
        source=SOURCE_TEXT_FALLBACK,
    )


def fallback_health_article(text, topic):
    return HealthArticle(
        title=f"Understanding {topic}: A Comprehensive Guide",
        overview=excerpt(text, OVERVIEW_LIMIT),
        key_points=[
            "Understanding the condition",
            "Recognizing symptoms early",
            "Lifestyle modifications",
            "Treatment options",
            "Prevention strategies",
            "Long-term management",
        ],
        natural_treatments=[
            "Dietary modifications",
            "Herbal remedies",
            "Physical therapy",
            "Stress management",
            "Sleep optimization",
        ],
        evidence=(
            "Recent research supports the effectiveness of natural treatments "
            "combined with conventional medicine."
        ),
        prevention=[
            "Regular health screenings",
            "Healthy diet and exercise",
            "Stress management",
            "Adequate sleep",
        ],
        seek_help="Seek immediate medical attention if symptoms are severe, persistent, or worsening.",
        source=SOURCE_TEXT_FALLBACK,
    )


# ── Demo 内容（未配置任何 key） ────────────────────────────────────────────

DEMO_NOTICE = "Configure API keys in Settings → AI Configuration to get real AI-powered diagnosis."


def demo_symptom_diagnosis():
    return Diagnosis(
        condition="Common Cold (Demo Mode)",
        confidence=85,
        description=f"Demo analysis - {DEMO_NOTICE}",
        natural_remedies=[
            "Drink warm ginger tea with honey 3 times daily",
            "Gargle with warm salt water",
            "Eat citrus fruits rich in Vitamin C (oranges, lemons)",
            "Rest and stay hydrated with plenty of fluids",
            "Use steam inhalation with eucalyptus oil",
        ],
        foods=[
            "Chicken soup with garlic and onions",
            "Fresh fruits: oranges, kiwi, berries",
            "Vegetables: spinach, broccoli, bell peppers",
            "Herbal teas: chamomile, peppermint, echinacea",
            "Avoid dairy and processed foods temporarily",
        ],
        medications=[
            "Paracetamol 500mg every 6 hours for fever (if needed)",
            "Throat lozenges for sore throat",
            "Saline nasal spray for congestion",
        ],
        administration=[
            "Take medications with food to avoid stomach upset",
            "Drink remedies warm, not hot",
            "Continue treatment for 5-7 days",
            "Rest is crucial - get 8+ hours of sleep",
        ],
        warning=(
            "This is demo content. Configure API keys in Settings for real AI analysis. "
            "Seek medical attention if symptoms worsen or persist beyond 10 days."
        ),
        source=SOURCE_DEMO,
    )


def demo_photo_diagnosis():
    return Diagnosis(
        condition="Contact Dermatitis (Demo)",
        confidence=78,
        description=f"Demo analysis - {DEMO_NOTICE}",
        severity="mild",
        anomaly_detected=True,
        natural_remedies=[
            "Apply cool, wet compresses for 15-20 minutes several times daily",
            "Use aloe vera gel (pure, without additives) 3-4 times daily",
            "Take oatmeal baths - blend oats and add to lukewarm bath water",
        ],
        foods=[
            "Anti-inflammatory foods: turmeric, ginger, leafy greens",
            "Omega-3 rich foods: walnuts, flaxseeds, chia seeds",
        ],
        medications=[
            "Antihistamine (Benadryl) 25mg every 6 hours for itching",
            "Hydrocortisone cream 1% - apply thin layer twice daily",
        ],
        exercises=[
            "Gentle stretching to improve circulation",
            "Light walking to boost immune system",
        ],
        administration=[
            "Clean affected area gently with mild soap",
            "Pat dry, don't rub the skin",
        ],
        prevention=[
            "Identify and avoid triggers",
            "Use hypoallergenic products",
        ],
        warning="This is demo content. Configure API keys in Settings for real AI analysis.",
        treatment_plan=TreatmentPhases(
            phase1="Immediate relief (Days 1-3)",
            phase2="Healing phase (Days 4-7)",
            phase3="Recovery and prevention (Week 2+)",
        ),
        source=SOURCE_DEMO,
    )


def demo_treatment_plan():
    return TreatmentPlan(
        lifecycle_phases=default_phases(),
        natural_remedies=[
            "Rest and adequate sleep (8+ hours)",
            "Stress reduction techniques and meditation",
            "Natural anti-inflammatory foods and herbs",
            "Gentle exercise as tolerated",
            "Hydration therapy with electrolytes",
            "Herbal remedies specific to condition",
        ],
        foods=[
            "Anti-inflammatory foods (turmeric, ginger)",
            "Fresh fruits and vegetables (5+ servings daily)",
            "Lean proteins (fish, legumes, poultry)",
            "Whole grains and complex carbohydrates",
            "Healthy fats (avocado, nuts, olive oil)",
            "Adequate hydration (8-10 glasses water)",
        ],
        medications=[
            "Over-the-counter pain relief as needed",
            "Anti-inflammatory medications if required",
            "Topical treatments for localized symptoms",
            "Supplements as recommended by healthcare provider",
        ],
        exercises=[
            "Gentle stretching and flexibility exercises",
            "Light walking or low-impact cardio",
            "Breathing exercises and relaxation techniques",
            "Range of motion activities",
            "Gradual increase in activity level",
        ],
        daily_schedule=[
            ScheduleEntry("08:00", "Morning medication and healthy breakfast", "medication"),
            ScheduleEntry("12:00", "Nutritious lunch and light exercise", "nutrition"),
            ScheduleEntry("18:00", "Evening medication and dinner", "medication"),
            ScheduleEntry("21:00", "Relaxation routine and sleep preparation", "wellness"),
        ],
        prevention_tips=[
            "Maintain consistent healthy lifestyle habits",
            "Regular exercise routine (150 min/week)",
            "Effective stress management techniques",
            "Adequate sleep hygiene (7-9 hours nightly)",
        ],
        possible_causes=[
            "Lifestyle factors and dietary choices",
            "Environmental triggers and allergens",
            "Genetic predisposition and family history",
            "Previous injuries or underlying conditions",
        ],
        source=SOURCE_DEMO,
    )
