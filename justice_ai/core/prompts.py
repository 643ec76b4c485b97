LEGAL_CONTEXT = """
**Pakistan Penal Code:**
- Section 378: Theft - Dishonestly taking movable property without consent. Punishment: 3 years imprisonment, fine, or both.
- Section 403: Dishonest misappropriation of property - Punishment: 2 years imprisonment, fine, or both
- Section 420: Cheating and dishonestly inducing delivery of property - 7 years imprisonment + fine
- Section 441: Criminal trespass - Entering property without lawful authority
- Section 406: Criminal breach of trust - Punishment: 3 years imprisonment or fine or both
- Section 497: Adultery - Punishable with 5 years imprisonment or fine or both
- Section 500: Defamation - Punishment: 2 years imprisonment, or fine, or both

**Constitution of Pakistan:**
- Article 4: Right of individuals to be dealt with in accordance with law
- Article 9: Security of person - No deprivation of life or liberty save in accordance with law
- Article 10A: Right to fair trial and due process
- Article 14: Inviolability of dignity of man
- Article 19A: Right to information
- Article 25: Equality of citizens

**Consumer Protection (Punjab Consumer Protection Act 2005):**
- Section 2: Definition of consumer - Any person who buys goods or services
- Section 10: How to file consumer complaint - Written complaint to District Consumer Court within 2 years
- Section 13: Available reliefs - Replacement, refund, compensation, repair
- Section 14: Unfair practices - False representation, deceptive practices

**Property Laws:**
- Land Revenue Act 1967 Section 42: Mutation process - Apply to Patwari with sale deed, CNIC, payment proof
- Transfer of Property Act 1882 Section 54: Sale of immovable property - Must be registered if value >= Rs. 100
- Registration Act 1908: Mandatory registration of property documents
- Punjab Pre-emption Act 1991: Right of pre-emption in property sales

**Family Laws:**
- Muslim Family Laws Ordinance 1961: Governs marriage, divorce, inheritance for Muslims
- Child Marriage Restraint Act 1929: Minimum age 16 for females, 18 for males
- Guardian and Wards Act 1890: Appointment of guardians for minors
- West Pakistan Family Courts Act 1964: Jurisdiction over family matters

**Labor Laws:**
- Industrial Relations Act 2012: Regulates trade unions, collective bargaining
- Factories Act 1934: Health, safety and welfare of factory workers
- Workmen's Compensation Act 1923: Compensation for work-related injuries
- Punjab Shops and Establishments Ordinance 1969: Regulates working conditions

**Rental Laws (Punjab Rented Premises Act 2009):**
- Section 4: Security deposit cannot exceed 2 months rent
- Section 8: Eviction procedures and grounds
- Section 13: Maintenance responsibilities
""".strip()


ENGLISH_DIRECTIVE = "Write every section in English."

URDU_DIRECTIVE = """
Write every section in the Urdu language. Begin each section with its Urdu title instead of the English one:
'قانونی تجزیہ' for LEGAL ANALYSIS, 'آپ کے حقوق' for YOUR RIGHTS, 'عمل کا منصوبہ' for ACTION PLAN and 'اہم نوٹس' for IMPORTANT DISCLAIMER.
""".strip()


LEGAL_ADVICE_PROMPT = """
You are JusticeAI, an AI legal advisor for Pakistan. Give practical, empathetic guidance that relies only on the Pakistani legal context below for legal facts.

LEGAL CONTEXT:
---
{legal_context}
---

USER'S SITUATION: {query}

{language_directive}

Cover these four sections:
1. LEGAL ANALYSIS: Explain the applicable Pakistani laws from the context above and how they bear on the situation.
2. YOUR RIGHTS: Identify the user's legal rights and protections based on the context.
3. ACTION PLAN: Give a step-by-step procedure with required documents, relevant authorities or courts, realistic timelines and expected outcomes.
4. IMPORTANT DISCLAIMER: State that this is general information and that the user should consult a qualified lawyer.

Reply with a single JSON object and nothing else, using exactly these keys:
{{"legalAnalysis": "<LEGAL ANALYSIS>", "rightsAnalysis": "<YOUR RIGHTS>", "actionPlan": "<ACTION PLAN>", "disclaimer": "<IMPORTANT DISCLAIMER>"}}
"""
