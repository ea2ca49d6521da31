"""Web interface for parsing and rebuilding SubRip files."""

from fastapi import FastAPI, File, UploadFile, Form, HTTPException
import logging
from pathlib import Path
from typing import Optional

from ..core import SubripFile, TimecodeError, TimelineOrderingViolation
from .. import __version__

logger = logging.getLogger(__name__)

app = FastAPI(title="SubRip Captioning", description="Parse, clean up and rebuild SubRip subtitle files")

ALLOWED_EXTENSIONS = {'.srt'}

@app.get("/health")
async def health():
    """Report that the service is up."""
    return {"status": "ok", "version": __version__}

@app.post("/build")
async def build_file(
    file: UploadFile = File(...),
    strip_tags: bool = Form(False),
    strip_basic: bool = Form(False),
    replacements: bool = Form(False),
    from_index: int = Form(0),
    to_index: int = Form(-1),
    strict: bool = Form(False),
    encoding: Optional[str] = Form("utf-8-sig")
):
    """Parse an uploaded SubRip file and return it rebuilt with the given options."""
    if not file.filename or Path(file.filename).suffix.lower() not in ALLOWED_EXTENSIONS:
        raise HTTPException(status_code=400, detail="Only .srt files are supported")

    raw = await file.read()
    try:
        content = raw.decode(encoding or "utf-8-sig")
    except (UnicodeDecodeError, LookupError) as e:
        raise HTTPException(status_code=400, detail=f"Could not decode file: {e}")

    subrip = SubripFile(content, strict=strict)
    try:
        if subrip.parse() is None:
            raise HTTPException(status_code=400, detail="Not a SubRip file")
    except (TimecodeError, TimelineOrderingViolation) as e:
        logger.error(f"Failed to parse {file.filename}: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    subrip.set_options({
        'strip_tags': strip_tags,
        'strip_basic': strip_basic,
        'replacements': replacements,
    })
    subrip.build_part(from_index, to_index)

    logger.info(f"Built {file.filename}: {subrip.get_cues_count()} cues")
    return {
        "filename": file.filename,
        "cue_count": subrip.get_cues_count(),
        "content": subrip.get_file_content(),
    }

def main(host: str = "127.0.0.1", port: int = 8002) -> None:
    """Run the web interface with uvicorn."""
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host=host, port=port)

if __name__ == "__main__":
    main()
