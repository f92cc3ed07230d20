"""Canned workflow templates.

Templates are looked up by id, or matched against a description by keyword
pairs. Matching follows registry order: the first template whose keywords
all occur in the lower-cased description wins.
"""

from dataclasses import dataclass

from agentplan.models.agent_plan import Plan


@dataclass(frozen=True)
class CannedTemplate:
    """A pre-built plan plus the metadata used to offer and match it."""

    template_id: str
    label: str
    short_description: str
    keywords: tuple[str, ...]  # lower-case substrings, all required
    plan: Plan

    def matches(self, description: str) -> bool:
        lowered = description.lower()
        return all(keyword in lowered for keyword in self.keywords)


class TemplateRegistry:
    """Ordered, read-only collection of canned templates."""

    def __init__(self, templates: list[CannedTemplate] | tuple[CannedTemplate, ...]) -> None:
        self._templates = tuple(templates)
        self._by_id = {template.template_id: template for template in self._templates}

    def ids(self) -> list[str]:
        return [template.template_id for template in self._templates]

    def get(self, template_id: str) -> Plan | None:
        """Return a copy of the template plan, or None for unknown ids."""
        template = self._by_id.get(template_id)
        if template is None:
            return None
        return template.plan.model_copy(deep=True)

    def match(self, description: str) -> Plan | None:
        """Return a copy of the first template whose keywords match."""
        for template in self._templates:
            if template.matches(description):
                return template.plan.model_copy(deep=True)
        return None

    def examples(self) -> list[dict]:
        """Id, label and description entries for example pickers."""
        return [
            {
                "id": template.template_id,
                "label": template.label,
                "shortDescription": template.short_description,
                "description": template.plan.description,
            }
            for template in self._templates
        ]


SUPPORT_TRIAGE = Plan.model_validate({
    "version": "0.1",
    "title": "Support Ticket Triage",
    "description": (
        "Ingest support emails, extract details, classify severity, require human "
        "approval for critical, create a Jira ticket, notify Slack."
    ),
    "agents": [
        {
            "id": "email-ingester",
            "name": "Email Ingester",
            "type": "Retriever",
            "summary": "Fetches incoming support emails from the inbox",
            "inputs": [{"name": "email_inbox"}],
            "outputs": [{"name": "raw_email"}],
            "suggestedTools": ["IMAP Client", "Gmail API"],
        },
        {
            "id": "detail-extractor",
            "name": "Detail Extractor",
            "type": "Extractor",
            "summary": "Parses email to extract sender, subject, body, and metadata",
            "inputs": [{"from": "email-ingester", "name": "raw_email"}],
            "outputs": [{"name": "ticket_details"}],
            "suggestedTools": ["NLP Parser", "Regex"],
        },
        {
            "id": "severity-classifier",
            "name": "Severity Classifier",
            "type": "Classifier",
            "summary": "Classifies ticket severity as low, medium, high, or critical",
            "inputs": [{"from": "detail-extractor", "name": "ticket_details"}],
            "outputs": [{"name": "severity"}, {"name": "classified_ticket"}],
            "suggestedTools": ["ML Classifier", "Rule Engine"],
        },
        {
            "id": "human-approval",
            "name": "Human Approval Gate",
            "type": "HumanGate",
            "summary": "Routes critical tickets for human approval before action",
            "inputs": [{"from": "severity-classifier", "name": "classified_ticket"}],
            "outputs": [{"name": "approved_ticket"}],
            "suggestedTools": ["Slack Bot", "Email Notifier"],
            "notes": ["Only triggered for critical severity"],
        },
        {
            "id": "jira-creator",
            "name": "Jira Ticket Creator",
            "type": "ToolExecutor",
            "summary": "Creates a Jira ticket with extracted details and severity",
            "inputs": [{"from": "human-approval", "name": "approved_ticket"}],
            "outputs": [{"name": "jira_issue"}],
            "suggestedTools": ["Jira REST API"],
        },
        {
            "id": "slack-notifier",
            "name": "Slack Notifier",
            "type": "Notifier",
            "summary": "Posts notification to the support channel with ticket link",
            "inputs": [{"from": "jira-creator", "name": "jira_issue"}],
            "outputs": [{"name": "notification_sent"}],
            "suggestedTools": ["Slack Webhook", "Slack Bot"],
        },
    ],
    "edges": [
        {"from": "email-ingester", "to": "detail-extractor", "data": "raw_email"},
        {"from": "detail-extractor", "to": "severity-classifier", "data": "ticket_details"},
        {"from": "severity-classifier", "to": "human-approval", "data": "classified_ticket"},
        {"from": "human-approval", "to": "jira-creator", "data": "approved_ticket"},
        {"from": "jira-creator", "to": "slack-notifier", "data": "jira_issue"},
    ],
    "dataSchemas": {
        "raw_email": {"fields": ["from", "to", "subject", "body", "timestamp"]},
        "ticket_details": {"fields": ["sender", "subject", "description", "urgency_keywords"]},
        "severity": {"fields": ["level", "confidence"]},
        "jira_issue": {"fields": ["key", "url", "summary", "priority"]},
    },
})

LEAD_QUALIFICATION = Plan.model_validate({
    "version": "0.1",
    "title": "Lead Qualification Pipeline",
    "description": (
        "Collect inbound form submissions, enrich with Clearbit, score the lead, route "
        "to AE if score > 80, create a CRM record, and email a personalized intro."
    ),
    "agents": [
        {
            "id": "form-collector",
            "name": "Form Submission Collector",
            "type": "Retriever",
            "summary": "Collects inbound lead form submissions from the website",
            "inputs": [{"name": "form_webhook"}],
            "outputs": [{"name": "lead_submission"}],
            "suggestedTools": ["Webhook Handler", "Form Parser"],
        },
        {
            "id": "clearbit-enricher",
            "name": "Clearbit Enricher",
            "type": "Retriever",
            "summary": "Enriches lead data with company and person info from Clearbit",
            "inputs": [{"from": "form-collector", "name": "lead_submission"}],
            "outputs": [{"name": "enriched_lead"}],
            "suggestedTools": ["Clearbit API", "Company Database"],
        },
        {
            "id": "lead-scorer",
            "name": "Lead Scorer",
            "type": "Classifier",
            "summary": "Scores the lead based on company size, role, and engagement signals",
            "inputs": [{"from": "clearbit-enricher", "name": "enriched_lead"}],
            "outputs": [{"name": "scored_lead"}],
            "suggestedTools": ["Scoring Model", "Rule Engine"],
        },
        {
            "id": "ae-router",
            "name": "AE Router",
            "type": "Classifier",
            "summary": "Routes high-scoring leads (>80) to an Account Executive",
            "inputs": [{"from": "lead-scorer", "name": "scored_lead"}],
            "outputs": [{"name": "routed_lead"}],
            "suggestedTools": ["Assignment Rules", "Round Robin"],
            "notes": ["Leads with score <= 80 go to nurture sequence"],
        },
        {
            "id": "crm-creator",
            "name": "CRM Record Creator",
            "type": "ToolExecutor",
            "summary": "Creates or updates a lead record in the CRM",
            "inputs": [{"from": "ae-router", "name": "routed_lead"}],
            "outputs": [{"name": "crm_record"}],
            "suggestedTools": ["Salesforce API", "HubSpot API"],
        },
        {
            "id": "intro-emailer",
            "name": "Personalized Intro Emailer",
            "type": "Generator",
            "summary": "Generates and sends a personalized intro email to the lead",
            "inputs": [{"from": "crm-creator", "name": "crm_record"}],
            "outputs": [{"name": "email_sent"}],
            "suggestedTools": ["Email Template Engine", "SendGrid"],
        },
    ],
    "edges": [
        {"from": "form-collector", "to": "clearbit-enricher", "data": "lead_submission"},
        {"from": "clearbit-enricher", "to": "lead-scorer", "data": "enriched_lead"},
        {"from": "lead-scorer", "to": "ae-router", "data": "scored_lead"},
        {"from": "ae-router", "to": "crm-creator", "data": "routed_lead"},
        {"from": "crm-creator", "to": "intro-emailer", "data": "crm_record"},
    ],
    "dataSchemas": {
        "lead_submission": {"fields": ["email", "name", "company", "message"]},
        "enriched_lead": {"fields": ["email", "name", "company", "title", "employees", "industry"]},
        "scored_lead": {"fields": ["lead", "score", "score_breakdown"]},
        "crm_record": {"fields": ["id", "url", "owner"]},
    },
})

WEEKLY_REPORT = Plan.model_validate({
    "version": "0.1",
    "title": "Weekly Report Generator",
    "description": (
        "Fetch metrics from analytics and billing, summarize key changes, generate a "
        "short natural-language report, and email it to the team."
    ),
    "agents": [
        {
            "id": "analytics-fetcher",
            "name": "Analytics Metrics Fetcher",
            "type": "Retriever",
            "summary": "Fetches weekly metrics from the analytics platform",
            "inputs": [{"name": "analytics_api"}],
            "outputs": [{"name": "analytics_data"}],
            "suggestedTools": ["Google Analytics API", "Mixpanel API"],
        },
        {
            "id": "billing-fetcher",
            "name": "Billing Metrics Fetcher",
            "type": "Retriever",
            "summary": "Fetches revenue and billing data from the billing system",
            "inputs": [{"name": "billing_api"}],
            "outputs": [{"name": "billing_data"}],
            "suggestedTools": ["Stripe API", "Chargebee API"],
        },
        {
            "id": "change-summarizer",
            "name": "Change Summarizer",
            "type": "Extractor",
            "summary": "Identifies and summarizes key changes week-over-week",
            "inputs": [
                {"from": "analytics-fetcher", "name": "analytics_data"},
                {"from": "billing-fetcher", "name": "billing_data"},
            ],
            "outputs": [{"name": "change_summary"}],
            "suggestedTools": ["Data Diff Tool", "Statistical Analyzer"],
        },
        {
            "id": "report-generator",
            "name": "Report Generator",
            "type": "Generator",
            "summary": "Generates a natural-language weekly report with key highlights",
            "inputs": [{"from": "change-summarizer", "name": "change_summary"}],
            "outputs": [{"name": "report_draft"}],
            "suggestedTools": ["LLM", "Template Engine"],
        },
        {
            "id": "team-emailer",
            "name": "Team Emailer",
            "type": "Notifier",
            "summary": "Sends the generated report to the team via email",
            "inputs": [{"from": "report-generator", "name": "report_draft"}],
            "outputs": [{"name": "email_sent"}],
            "suggestedTools": ["SendGrid", "SES"],
        },
    ],
    "edges": [
        {"from": "analytics-fetcher", "to": "change-summarizer", "data": "analytics_data"},
        {"from": "billing-fetcher", "to": "change-summarizer", "data": "billing_data"},
        {"from": "change-summarizer", "to": "report-generator", "data": "change_summary"},
        {"from": "report-generator", "to": "team-emailer", "data": "report_draft"},
    ],
    "dataSchemas": {
        "analytics_data": {"fields": ["pageviews", "sessions", "users", "conversion_rate"]},
        "billing_data": {"fields": ["mrr", "churn", "new_revenue", "renewals"]},
        "change_summary": {"fields": ["highlights", "concerns", "trends"]},
        "report_draft": {"fields": ["title", "body", "bullet_points"]},
    },
})

DEFAULT_TEMPLATES = TemplateRegistry([
    CannedTemplate(
        template_id="support-triage",
        label="Support Triage",
        short_description="Process support emails and create tickets",
        keywords=("support", "triage"),
        plan=SUPPORT_TRIAGE,
    ),
    CannedTemplate(
        template_id="lead-qualification",
        label="Lead Qualification",
        short_description="Qualify and route inbound leads",
        keywords=("lead", "qualif"),
        plan=LEAD_QUALIFICATION,
    ),
    CannedTemplate(
        template_id="weekly-report",
        label="Weekly Report",
        short_description="Generate and send weekly metrics report",
        keywords=("weekly", "report"),
        plan=WEEKLY_REPORT,
    ),
])
