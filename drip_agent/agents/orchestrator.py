"""
Job Orchestrator - Drives one analysis job through the pipeline.

Stages run as a LangGraph workflow:
acquire_profile -> analyze_vibe -> match_style -> find_products -> publish_lookbook.
Every stage persists its status and progress before doing its work, and any
failure lands the job in the terminal error state.
"""

import asyncio
import uuid
from typing import Optional, TypedDict

import structlog
from langgraph.graph import END, StateGraph

from drip_agent.agents.demographics import DemographicsAgent
from drip_agent.agents.personality import PersonalityAgent
from drip_agent.agents.shopping import ProductMatcher
from drip_agent.agents.style import StyleResolver
from drip_agent.agents.vibe import VibeAggregator
from drip_agent.catalog.store import CatalogStore
from drip_agent.core.config import Settings
from drip_agent.core.llm_clients import LLMClient
from drip_agent.core.logging_config import bind_job_context
from drip_agent.core.store import JobStore
from drip_agent.models.enums import JobStatus
from drip_agent.models.job import AnalysisJob, Lookbook
from drip_agent.models.product import ShoppingResult
from drip_agent.models.profile import Profile
from drip_agent.models.style import StyleRecommendation
from drip_agent.models.vibe import VibeProfile
from drip_agent.services.profile_source import ProfileSource, demo_profile
from drip_agent.services.weather import WeatherAdvisor

logger = structlog.get_logger(__name__)


class PipelineState(TypedDict, total=False):
    """State flowing through the job workflow."""
    job_id: str
    handle: str
    direct_input: Optional[str]
    profile: Profile
    vibe: VibeProfile
    style: StyleRecommendation
    products: ShoppingResult
    lookbook_id: str


class JobOrchestrator:
    """
    Owns analysis jobs from creation to their terminal state.

    `start_analysis` returns as soon as the job record exists; processing
    continues in a task tracked per job id.
    """

    def __init__(
        self,
        store: JobStore,
        profile_source: ProfileSource,
        vibe_aggregator: VibeAggregator,
        style_resolver: StyleResolver,
        product_matcher: ProductMatcher,
    ):
        self.store = store
        self.profile_source = profile_source
        self.vibe_aggregator = vibe_aggregator
        self.style_resolver = style_resolver
        self.product_matcher = product_matcher
        self._tasks: dict[str, asyncio.Task] = {}
        self._workflow = self._setup_workflow()

    def _setup_workflow(self):
        workflow = StateGraph(PipelineState)

        workflow.add_node("acquire_profile", self._acquire_profile)
        workflow.add_node("analyze_vibe", self._analyze_vibe)
        workflow.add_node("match_style", self._match_style)
        workflow.add_node("find_products", self._find_products)
        workflow.add_node("publish_lookbook", self._publish_lookbook)

        workflow.set_entry_point("acquire_profile")
        workflow.add_edge("acquire_profile", "analyze_vibe")
        workflow.add_edge("analyze_vibe", "match_style")
        workflow.add_edge("match_style", "find_products")
        workflow.add_edge("find_products", "publish_lookbook")
        workflow.add_edge("publish_lookbook", END)

        return workflow.compile()

    # ==================== Public surface ====================

    async def start_analysis(self, handle: str, direct_input: Optional[str] = None) -> str:
        """Create a job and start processing it in the background."""
        job_id = str(uuid.uuid4())
        await self.store.create_job(AnalysisJob(id=job_id, handle=handle))

        task = asyncio.create_task(
            self._process_job(job_id, handle, direct_input),
            name=f"analysis-{job_id}",
        )
        self._tasks[job_id] = task
        task.add_done_callback(lambda _: self._tasks.pop(job_id, None))

        logger.info("Analysis started", job_id=job_id, handle=handle, direct_input=bool(direct_input))
        return job_id

    async def get_job_status(self, job_id: str) -> Optional[AnalysisJob]:
        return await self.store.get_job(job_id)

    async def get_lookbook(self, lookbook_id: str) -> Optional[Lookbook]:
        return await self.store.get_lookbook(lookbook_id)

    async def wait_for(self, job_id: str) -> Optional[AnalysisJob]:
        """Wait until a job's processing task finishes, then return its record."""
        task = self._tasks.get(job_id)
        if task is not None:
            await asyncio.wait({task})
        return await self.store.get_job(job_id)

    async def shutdown(self) -> None:
        """Let in-flight jobs run to their terminal state."""
        if self._tasks:
            logger.info("Draining analysis jobs", running=len(self._tasks))
            await asyncio.wait(set(self._tasks.values()))

    # ==================== Job processing ====================

    async def _process_job(self, job_id: str, handle: str, direct_input: Optional[str]) -> None:
        with bind_job_context(job_id, handle):
            try:
                await self._workflow.ainvoke(
                    {"job_id": job_id, "handle": handle, "direct_input": direct_input}
                )
            except Exception as e:
                message = str(e) or type(e).__name__
                logger.error("Job failed", error=message, error_type=type(e).__name__)
                try:
                    await self._advance(job_id, JobStatus.ERROR, error=message)
                except Exception:
                    logger.exception("Could not record job failure")

    async def _advance(
        self,
        job_id: str,
        status: Optional[JobStatus] = None,
        progress: Optional[int] = None,
        **fields,
    ) -> None:
        """
        Persist a stage transition.

        Terminal jobs are never updated again, and progress never moves
        backwards.
        """
        job = await self.store.get_job(job_id)
        if job is None or job.status.is_terminal:
            logger.warning("Ignoring update for finished job", job_id=job_id, status=status)
            return

        update = dict(fields)
        if status is not None:
            update["status"] = status
        if progress is not None:
            update["progress"] = max(job.progress, progress)

        await self.store.update_job(job_id, **update)

    async def _acquire_profile(self, state: PipelineState) -> dict:
        job_id, handle = state["job_id"], state["handle"]
        await self._advance(job_id, JobStatus.SCRAPING, 10)

        direct_input = state.get("direct_input")
        if direct_input:
            logger.info("Using direct input")
            profile = self.profile_source.parse_local_input(direct_input, handle)
        else:
            try:
                profile = await self.profile_source.fetch_profile(handle)
            except Exception as e:
                logger.warning("Profile scrape failed, using demo profile", error=str(e))
                profile = demo_profile(handle)

        await self._advance(job_id, progress=25)
        return {"profile": profile}

    async def _analyze_vibe(self, state: PipelineState) -> dict:
        job_id = state["job_id"]
        await self._advance(job_id, JobStatus.ANALYZING_VIBE, 30)

        vibe = await self.vibe_aggregator.execute(state["profile"])

        await self._advance(job_id, progress=50)
        return {"vibe": vibe}

    async def _match_style(self, state: PipelineState) -> dict:
        job_id = state["job_id"]
        await self._advance(job_id, JobStatus.MATCHING_STYLE, 55)

        style = await self.style_resolver.execute(state["vibe"])

        await self._advance(job_id, progress=70)
        return {"style": style}

    async def _find_products(self, state: PipelineState) -> dict:
        job_id = state["job_id"]
        await self._advance(job_id, JobStatus.FINDING_PRODUCTS, 75)

        products = await self.product_matcher.execute(state["style"], state["vibe"])

        await self._advance(job_id, progress=90)
        return {"products": products}

    async def _publish_lookbook(self, state: PipelineState) -> dict:
        lookbook = Lookbook(
            id=str(uuid.uuid4()),
            handle=state["handle"],
            profile=state["profile"],
            vibe=state["vibe"],
            style=state["style"],
            products=state["products"],
        )
        await self.store.save_lookbook(lookbook)
        await self._advance(state["job_id"], JobStatus.COMPLETE, 100, lookbook_id=lookbook.id)

        logger.info("Job complete", lookbook_id=lookbook.id)
        return {"lookbook_id": lookbook.id}


def build_orchestrator(
    settings: Settings,
    llm: LLMClient,
    store: JobStore,
    catalog: CatalogStore,
    profile_source: Optional[ProfileSource] = None,
    weather_advisor: Optional[WeatherAdvisor] = None,
) -> JobOrchestrator:
    """Wire the pipeline components around one injected LLM client."""
    vibe_aggregator = VibeAggregator(
        personality_agent=PersonalityAgent(llm),
        demographics_agent=DemographicsAgent(llm),
        weather_advisor=weather_advisor or WeatherAdvisor(settings),
    )
    return JobOrchestrator(
        store=store,
        profile_source=profile_source or ProfileSource(settings),
        vibe_aggregator=vibe_aggregator,
        style_resolver=StyleResolver(llm, catalog),
        product_matcher=ProductMatcher(llm, catalog, settings),
    )
