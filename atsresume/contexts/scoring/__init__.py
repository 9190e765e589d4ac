"""
Scoring Context

Responsibilities:
- Extracts ranked keywords and skill phrases from job descriptions
- Computes keyword, formatting and structure sub-scores and the overall ATS score
- Generates prioritized optimization suggestions

Owns: Scoring rules (ats_rules.yaml) and the ATSScore record
Never: Parses documents or mutates the resume it scores
"""
