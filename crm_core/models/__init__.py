# Generated from the entity catalog by `crm-entities generate`.
# Do not edit: this file is rewritten on every run.
"""
CRM entity models
"""

from .agent import Agent
from .agent_type import AgentType
from .billing_frequency import BillingFrequency
from .brand import Brand
from .calendar import Calendar
from .calendar_external_link import CalendarExternalLink
from .calendar_type import CalendarType
from .campaign import Campaign
from .city import City
from .company import Company
from .competitor import Competitor
from .contact import Contact
from .country import Country
from .deal import Deal
from .deal_category import DealCategory
from .deal_stage import DealStage
from .deal_type import DealType
from .event import Event
from .event_attendee import EventAttendee
from .event_category import EventCategory
from .event_resource import EventResource
from .event_resource_booking import EventResourceBooking
from .event_resource_type import EventResourceType
from .flag import Flag
from .holiday import Holiday
from .holiday_template import HolidayTemplate
from .lead_source import LeadSource
from .lost_reason import LostReason
from .meeting_data import MeetingData
from .notification import Notification
from .notification_type import NotificationType
from .notification_type_template import NotificationTypeTemplate
from .pipeline import Pipeline
from .pipeline_stage import PipelineStage
from .pipeline_stage_template import PipelineStageTemplate
from .pipeline_template import PipelineTemplate
from .product import Product
from .product_batch import ProductBatch
from .product_line import ProductLine
from .profile_template import ProfileTemplate
from .reminder import Reminder
from .social_media import SocialMedia
from .step_action import StepAction
from .step_iteration import StepIteration
from .tag import Tag
from .talk import Talk
from .talk_message import TalkMessage
from .task import Task
from .task_template import TaskTemplate
from .time_zone import TimeZone
from .win_reason import WinReason
from .working_hour import WorkingHour

ENTITY_CLASSES = {
    "Agent": Agent,
    "AgentType": AgentType,
    "BillingFrequency": BillingFrequency,
    "Brand": Brand,
    "Calendar": Calendar,
    "CalendarExternalLink": CalendarExternalLink,
    "CalendarType": CalendarType,
    "Campaign": Campaign,
    "City": City,
    "Company": Company,
    "Competitor": Competitor,
    "Contact": Contact,
    "Country": Country,
    "Deal": Deal,
    "DealCategory": DealCategory,
    "DealStage": DealStage,
    "DealType": DealType,
    "Event": Event,
    "EventAttendee": EventAttendee,
    "EventCategory": EventCategory,
    "EventResource": EventResource,
    "EventResourceBooking": EventResourceBooking,
    "EventResourceType": EventResourceType,
    "Flag": Flag,
    "Holiday": Holiday,
    "HolidayTemplate": HolidayTemplate,
    "LeadSource": LeadSource,
    "LostReason": LostReason,
    "MeetingData": MeetingData,
    "Notification": Notification,
    "NotificationType": NotificationType,
    "NotificationTypeTemplate": NotificationTypeTemplate,
    "Pipeline": Pipeline,
    "PipelineStage": PipelineStage,
    "PipelineStageTemplate": PipelineStageTemplate,
    "PipelineTemplate": PipelineTemplate,
    "Product": Product,
    "ProductBatch": ProductBatch,
    "ProductLine": ProductLine,
    "ProfileTemplate": ProfileTemplate,
    "Reminder": Reminder,
    "SocialMedia": SocialMedia,
    "StepAction": StepAction,
    "StepIteration": StepIteration,
    "Tag": Tag,
    "Talk": Talk,
    "TalkMessage": TalkMessage,
    "Task": Task,
    "TaskTemplate": TaskTemplate,
    "TimeZone": TimeZone,
    "WinReason": WinReason,
    "WorkingHour": WorkingHour,
}

__all__ = [
    "Agent",
    "AgentType",
    "BillingFrequency",
    "Brand",
    "Calendar",
    "CalendarExternalLink",
    "CalendarType",
    "Campaign",
    "City",
    "Company",
    "Competitor",
    "Contact",
    "Country",
    "Deal",
    "DealCategory",
    "DealStage",
    "DealType",
    "Event",
    "EventAttendee",
    "EventCategory",
    "EventResource",
    "EventResourceBooking",
    "EventResourceType",
    "Flag",
    "Holiday",
    "HolidayTemplate",
    "LeadSource",
    "LostReason",
    "MeetingData",
    "Notification",
    "NotificationType",
    "NotificationTypeTemplate",
    "Pipeline",
    "PipelineStage",
    "PipelineStageTemplate",
    "PipelineTemplate",
    "Product",
    "ProductBatch",
    "ProductLine",
    "ProfileTemplate",
    "Reminder",
    "SocialMedia",
    "StepAction",
    "StepIteration",
    "Tag",
    "Talk",
    "TalkMessage",
    "Task",
    "TaskTemplate",
    "TimeZone",
    "WinReason",
    "WorkingHour",
    "ENTITY_CLASSES",
]
