"""
User-facing text in English and Urdu.

Every string a user can see (validation errors, failure banners, notices,
control labels, section headings, example cases) lives here so that the
controller, the API and the UI localize the same way.
"""
from typing import Dict, List, Tuple

from .constants import Language

EN = Language.EN
UR = Language.UR


MESSAGES: Dict[str, Dict[Language, str]] = {
    # Validation
    "query_empty": {
        EN: "Please enter a legal query to analyze.",
        UR: "براہ کرم تجزیہ کے لیے قانونی سوال درج کریں۔",
    },
    "query_too_short": {
        EN: "Query must be at least {min_length} characters long.",
        UR: "سوال کم از کم {min_length} حروف کا ہونا چاہیے۔",
    },
    "query_too_long": {
        EN: "Query must be less than {max_length} characters.",
        UR: "سوال {max_length} حروف سے کم ہونا چاہیے۔",
    },
    # Request lifecycle
    "analysis_failed": {
        EN: "An error occurred while processing your case. Please try again.",
        UR: "آپ کے کیس کو پروسیس کرتے وقت خرابی ہوئی۔ براہ کرم دوبارہ کوشش کریں۔",
    },
    "retries_exhausted": {
        EN: "Maximum retries reached. Please edit your query or try again later.",
        UR: "دوبارہ کوشش کی حد پوری ہو گئی۔ براہ کرم اپنا سوال تبدیل کریں یا بعد میں کوشش کریں۔",
    },
    "notice_success_title": {
        EN: "Analysis Complete",
        UR: "تجزیہ مکمل",
    },
    "notice_success_body": {
        EN: "Your legal analysis is ready.",
        UR: "آپ کا قانونی تجزیہ تیار ہے۔",
    },
    "notice_failure_title": {
        EN: "Analysis Failed",
        UR: "تجزیہ ناکام",
    },
    # Controls and page text
    "page_title": {
        EN: "Describe Your Legal Situation",
        UR: "اپنی قانونی صورتحال بیان کریں",
    },
    "page_intro": {
        EN: "Enter your query below. JusticeAI will provide an analysis and a step-by-step action plan.",
        UR: "نیچے اپنا سوال درج کریں۔ JusticeAI تجزیہ اور قدم بہ قدم عمل کا منصوبہ فراہم کرے گا۔",
    },
    "input_placeholder": {
        EN: "Explain your legal issue in detail...",
        UR: "اپنا قانونی مسئلہ تفصیل سے بیان کریں...",
    },
    "analyze": {
        EN: "Analyze Case & Get Action Plan",
        UR: "تجزیہ کریں اور عمل کا منصوبہ حاصل کریں",
    },
    "analyzing": {
        EN: "Analyzing...",
        UR: "تجزیہ ہو رہا ہے...",
    },
    "clear": {
        EN: "Clear",
        UR: "صاف کریں",
    },
    "retry": {
        EN: "Retry",
        UR: "دوبارہ کوشش کریں",
    },
    "results_title": {
        EN: "Legal Analysis & Action Plan",
        UR: "قانونی تجزیہ اور عمل کا منصوبہ",
    },
    "results_placeholder": {
        EN: "Your analysis and action plan will appear here.",
        UR: "آپ کا تجزیہ اور عمل کا منصوبہ یہاں ظاہر ہوگا۔",
    },
    "example_cases": {
        EN: "Example Cases",
        UR: "مثالی کیسز",
    },
    "footer_title": {
        EN: "Important Disclaimer:",
        UR: "اہم نوٹس:",
    },
    "footer_body": {
        EN: (
            "JusticeAI provides legal information based on Pakistani laws. "
            "This is not legal advice. Always consult with a qualified lawyer "
            "for your specific situation."
        ),
        UR: (
            "JusticeAI پاکستانی قوانین کی بنیاد پر قانونی معلومات فراہم کرتا ہے۔ "
            "یہ قانونی مشورہ نہیں ہے۔ اپنے معاملے کے لیے ہمیشہ کسی مستند وکیل سے رجوع کریں۔"
        ),
    },
}


# Wire name of each AdviceResult field, in display order
SECTION_KEYS: Tuple[str, ...] = (
    "legalAnalysis",
    "rightsAnalysis",
    "actionPlan",
    "disclaimer",
)

SECTION_LABELS: Dict[Language, Dict[str, str]] = {
    EN: {
        "legalAnalysis": "LEGAL ANALYSIS",
        "rightsAnalysis": "YOUR RIGHTS",
        "actionPlan": "ACTION PLAN",
        "disclaimer": "IMPORTANT DISCLAIMER",
    },
    UR: {
        "legalAnalysis": "قانونی تجزیہ",
        "rightsAnalysis": "آپ کے حقوق",
        "actionPlan": "عمل کا منصوبہ",
        "disclaimer": "اہم نوٹس",
    },
}


EXAMPLE_CASES: Dict[Language, List[str]] = {
    EN: [
        "My landlord kept my deposit for no reason and won't respond.",
        "I bought a refrigerator that stopped working within a week and the shop refuses a refund.",
        "My employer has not paid my salary for three months and threatens to fire me if I complain.",
        "I purchased a plot but the seller is delaying the mutation in the land record.",
        "Someone is spreading false rumours about me on social media that are damaging my business.",
    ],
    UR: [
        "میرے مالک مکان نے بغیر کسی وجہ کے میری سیکیورٹی رقم رکھ لی ہے اور جواب نہیں دے رہا۔",
        "میں نے فریج خریدا جو ایک ہفتے میں خراب ہو گیا اور دکاندار رقم واپس کرنے سے انکار کر رہا ہے۔",
        "میرے آجر نے تین ماہ سے تنخواہ ادا نہیں کی اور شکایت کرنے پر نوکری سے نکالنے کی دھمکی دیتا ہے۔",
        "میں نے پلاٹ خریدا لیکن بیچنے والا زمین کے ریکارڈ میں انتقال میں تاخیر کر رہا ہے۔",
        "کوئی سوشل میڈیا پر میرے بارے میں جھوٹی افواہیں پھیلا رہا ہے جس سے میرے کاروبار کو نقصان ہو رہا ہے۔",
    ],
}


def translate(key: str, language: Language = Language.EN, **params) -> str:
    """Look up a message in the given language and fill its placeholders."""
    text = MESSAGES[key][Language(language)]
    return text.format(**params) if params else text


def section_labels(language: Language = Language.EN) -> Dict[str, str]:
    return SECTION_LABELS[Language(language)]
