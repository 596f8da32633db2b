# reporting.py  –  read-only analytics reports under /reporting/*

from ..marshal import passthrough, pick
from .base import ToolModule, tool

LABELS = {"category": "analytics", "access": "read", "complexity": "simple"}
DATE_RANGE = ["startDate", "endDate"]


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _ranged(**filters):
    """Schema for a dated report: location, start/end date, then filters."""
    return {
        "locationId": _s("Location ID"),
        "startDate": _s("Start date (YYYY-MM-DD)"),
        "endDate": _s("End date (YYYY-MM-DD)"),
        **filters,
    }


class ReportingTools(ToolModule):

    async def _report(self, kind, args, *filters):
        params = pick(args, "locationId", "startDate", "endDate", *filters)
        return passthrough(await self.client.get(f"/reporting/{kind}", params))

    @tool("get_attribution_report", "Get attribution/source tracking report showing where leads came from",
          _ranged(), required=DATE_RANGE, labels=LABELS)
    async def get_attribution_report(self, args):
        return await self._report("attribution", args)

    @tool("get_call_reports", "Get call activity reports including call duration, outcomes, etc.", _ranged(
        userId=_s("Filter by user ID"),
        type=_s("Call type filter", enum=["inbound", "outbound", "all"]),
    ), required=DATE_RANGE, labels={**LABELS, "complexity": "batch"})
    async def get_call_reports(self, args):
        return await self._report("calls", args, "userId", "type")

    @tool("get_appointment_reports", "Get appointment activity reports", _ranged(
        calendarId=_s("Filter by calendar ID"),
        status=_s("Appointment status filter", enum=["booked", "confirmed", "showed", "noshow", "cancelled"]),
    ), required=DATE_RANGE, labels=LABELS)
    async def get_appointment_reports(self, args):
        return await self._report("appointments", args, "calendarId", "status")

    @tool("get_pipeline_reports", "Get pipeline/opportunity performance reports", _ranged(
        pipelineId=_s("Filter by pipeline ID"),
        userId=_s("Filter by assigned user"),
    ), required=DATE_RANGE, labels=LABELS)
    async def get_pipeline_reports(self, args):
        return await self._report("pipelines", args, "pipelineId", "userId")

    @tool("get_email_reports", "Get email performance reports (deliverability, opens, clicks)",
          _ranged(), required=DATE_RANGE, labels=LABELS)
    async def get_email_reports(self, args):
        return await self._report("emails", args)

    @tool("get_sms_reports", "Get SMS performance reports", _ranged(), required=DATE_RANGE, labels=LABELS,
          action="get SMS reports")
    async def get_sms_reports(self, args):
        return await self._report("sms", args)

    @tool("get_funnel_reports", "Get funnel performance reports (page views, conversions)", _ranged(
        funnelId=_s("Filter by funnel ID"),
    ), required=DATE_RANGE, labels=LABELS)
    async def get_funnel_reports(self, args):
        return await self._report("funnels", args, "funnelId")

    @tool("get_ad_reports", "Get advertising performance reports (Google/Facebook ads)", _ranged(
        platform=_s("Ad platform", enum=["google", "facebook", "all"]),
    ), required=DATE_RANGE, labels=LABELS)
    async def get_ad_reports(self, args):
        return await self._report("ads", args, "platform")

    @tool("get_agent_reports", "Get agent/user performance reports", _ranged(
        userId=_s("Filter by user ID"),
    ), required=DATE_RANGE, labels=LABELS)
    async def get_agent_reports(self, args):
        return await self._report("agents", args, "userId")

    @tool("get_dashboard_stats", "Get main dashboard statistics overview", {
        "locationId": _s("Location ID"),
        "dateRange": _s("Date range preset", enum=["today", "yesterday", "last7days", "last30days", "thisMonth",
                                                   "lastMonth", "custom"]),
        "startDate": _s("Start date for custom range"),
        "endDate": _s("End date for custom range"),
    }, labels=LABELS)
    async def get_dashboard_stats(self, args):
        return await self._report("dashboard", args, "dateRange")

    @tool("get_conversion_reports", "Get conversion tracking reports", _ranged(
        source=_s("Filter by source"),
    ), required=DATE_RANGE, labels=LABELS)
    async def get_conversion_reports(self, args):
        return await self._report("conversions", args, "source")

    @tool("get_revenue_reports", "Get revenue/payment reports", _ranged(
        groupBy=_s("Group results by", enum=["day", "week", "month"]),
    ), required=DATE_RANGE, labels=LABELS)
    async def get_revenue_reports(self, args):
        return await self._report("revenue", args, "groupBy")
