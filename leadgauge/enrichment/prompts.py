"""
Enrichment Prompts

System prompts, user prompt templates and JSON schema hints for the
audit-wide narrative and the per-parameter refresh.
"""


# =============================================================================
# AUDIT-WIDE NARRATIVE
# =============================================================================

AUDIT_SYSTEM_PROMPT = """You are a senior business consultant specializing in digital transformation and business optimization. Provide detailed, actionable insights based on business audit data. Always return valid JSON without any markdown formatting or extra text."""


AUDIT_SCHEMA_HINT = """{
  "executiveSummary": "A 3-4 sentence executive summary of the business's digital presence and overall performance",
  "keyFindings": ["Finding 1", "Finding 2", "Finding 3", "Finding 4", "Finding 5"],
  "priorityRecommendations": ["High priority recommendation 1", "High priority recommendation 2", "High priority recommendation 3"],
  "competitiveAnalysis": "Analysis of competitive positioning and market presence (2-3 sentences)",
  "growthOpportunities": ["Opportunity 1", "Opportunity 2", "Opportunity 3", "Opportunity 4"],
  "riskAssessment": "Assessment of potential risks and vulnerabilities (2-3 sentences)",
  "actionPlan": {
    "immediate": ["Action to take within 1-2 weeks", "Another immediate action"],
    "shortTerm": ["Action for 1-3 months", "Another short-term action", "Third short-term action"],
    "longTerm": ["Strategic action for 6+ months", "Another long-term action"]
  },
  "industryBenchmarks": "How this business compares to industry standards and benchmarks (2-3 sentences)",
  "detailedAnalysis": "A comprehensive 4-5 paragraph analysis covering digital presence, operational efficiency, market positioning, and strategic recommendations"
}"""


AUDIT_USER_PROMPT = """You are conducting a comprehensive digital business audit. Analyze the following business and provide detailed insights.

## Business Information:
- URL: {url}
- Name: {name}
- Industry: {industry}
- Description: {description}

## Current Audit Scores:
{parameter_lines}

Total Score: {total_score}/100

Please provide a comprehensive analysis in the following JSON format:
{schema}

Focus on actionable insights, specific recommendations, and strategic guidance. Be professional but accessible in tone."""


# Used verbatim when the narrative response cannot be decoded
PLACEHOLDER_NARRATIVE = {
    "executiveSummary": "AI analysis completed with basic insights.",
    "keyFindings": ["Business analysis completed", "Review parameter scores for insights"],
    "priorityRecommendations": [
        "Focus on lowest scoring parameters",
        "Implement recommended improvements",
    ],
    "competitiveAnalysis": "Competitive analysis requires additional data.",
    "growthOpportunities": ["Digital optimization", "Process improvement"],
    "riskAssessment": "Risk assessment based on current parameter scores.",
    "actionPlan": {
        "immediate": ["Review audit results", "Identify priority areas"],
        "shortTerm": ["Implement quick wins", "Address critical issues"],
        "longTerm": ["Strategic improvements", "Long-term optimization"],
    },
    "industryBenchmarks": "Industry benchmarks vary by sector and business size.",
    "detailedAnalysis": "Detailed analysis of business performance across key parameters.",
}


# =============================================================================
# PER-PARAMETER REFRESH
# =============================================================================

PARAMETER_SYSTEM_PROMPT = """You are a business analyst providing specific, actionable insights for business improvement. Always return valid JSON without markdown formatting."""


PARAMETER_SCHEMA_HINT = """{
  "insights": ["Insight 1", "Insight 2", "Insight 3"],
  "recommendations": ["Recommendation 1", "Recommendation 2", "Recommendation 3", "Recommendation 4"]
}"""


PARAMETER_USER_PROMPT = """Analyze this specific business parameter and provide detailed insights:

Parameter: {name}
Current Score: {score}/100
Business: {url}
Industry: {industry}

Current findings:
{insights}

Provide 3-4 specific insights about what's working well and 3-4 actionable recommendations for improvement.
Focus on practical, implementable suggestions.

Respond in JSON format:
{schema}"""


# =============================================================================
# FREE-TEXT BUSINESS INSIGHTS
# =============================================================================

INSIGHTS_SYSTEM_PROMPT = """You are a business strategist providing insights for business optimization and growth."""


INSIGHTS_USER_PROMPT = """Analyze this business and provide strategic insights:

Business URL: {url}
Business Data: {business_data}

Provide 3-4 paragraphs of strategic business insights covering:
1. Market positioning and competitive advantages
2. Digital presence and online optimization opportunities
3. Operational efficiency and growth potential
4. Strategic recommendations for business development

Be specific and actionable in your recommendations."""
