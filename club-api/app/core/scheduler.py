"""
APScheduler pour les tâches de fond
- Audit périodique des uniformes (athlètes vs inventaire)
"""
import logging
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from app.core.config import settings

logger = logging.getLogger(__name__)

# Global scheduler instance
scheduler = BackgroundScheduler()


def audit_uniforms():
    """
    Logs every athlete whose hasUniform/uniformId mirror disagrees with the
    inventory. Nothing is repaired: a coach fixes it through the inventory API.
    """
    from app.core.db import SessionLocal
    from app.core.store import DocumentStore
    from app.services.inventory_service import find_uniform_mismatches

    db = SessionLocal()
    try:
        mismatches = find_uniform_mismatches(DocumentStore(db))
        for m in mismatches:
            logger.warning(
                f"[Scheduler] Uniform mismatch for athlete {m['athleteId']}: {m['reason']} "
                f"(hasUniform={m['hasUniform']}, uniformId={m['uniformId']}, items={m['assignedItemIds']})"
            )
        logger.info(f"[Scheduler] Uniform audit done, {len(mismatches)} mismatch(es)")
        return mismatches
    except Exception as e:
        logger.error(f"[Scheduler] Uniform audit failed: {e}")
        return []
    finally:
        db.close()


def setup_jobs():
    scheduler.add_job(
        audit_uniforms,
        trigger=IntervalTrigger(minutes=settings.UNIFORM_AUDIT_INTERVAL_MINUTES),
        id="uniform_audit",
        name="Audit uniformes athlètes / inventaire",
        replace_existing=True,
    )
    logger.info("[Scheduler] Jobs configured (1 job)")


def start_scheduler():
    if not scheduler.running:
        setup_jobs()
        scheduler.start()
        logger.info("[Scheduler] Started")


def stop_scheduler():
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("[Scheduler] Stopped")
