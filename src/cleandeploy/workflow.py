# workflow.py
# The clean -> build -> deploy pipeline for a Rust API hosted on Vercel.
from __future__ import annotations

from typing import List

from .dsl import step, wf
from .model import Phase, Step

CLEAN_BANNER = "--- 🧹 Cleaning previous builds ---"
BUILD_BANNER = "--- 🔨 Building Rust binary ---"
DEPLOY_BANNER = "--- 🚀 Deploying to Vercel ---"
COMPLETE_BANNER = "--- ✅ Deployment complete ---"


def workflow() -> List[Step]:
    return wf(
        step("clean", "cargo clean", phase=Phase.CLEAN, banner=CLEAN_BANNER),
        step("build", "cargo build", phase=Phase.BUILD, banner=BUILD_BANNER),
        # --yes bypasses the confirmation prompts
        step("deploy", "vercel --prod --force --yes", phase=Phase.DEPLOY, banner=DEPLOY_BANNER),
    )
