"""Fallback copy generation using canned templates.

Used when no API key is configured or the LLM call fails. The block is picked
by sniffing keywords in the instruction that opens the prompt (never in the
user-typed fields), and the product name is recovered from the prompt's
"for <name>." sentence.
"""
from __future__ import annotations

import logging
import re
from typing import List, Tuple

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_NAME = "your product"
PRODUCT_PLACEHOLDER = "{product}"

# Leftmost "for <name>." (or "about <name>." in the blog prompt)
_PRODUCT_PATTERN = re.compile(r"\b(?:for|about) ([^.]+)\.")

HEADLINE_BLOCK = """**Option 1:** Transform Your Business with {product}
Emphasizes transformation and directly addresses the target audience's desire for improvement.

**Option 2:** {product} - Where Innovation Meets Simplicity
Balances two key values: cutting-edge solutions and ease of use.

**Option 3:** Unlock Your Full Potential with {product}
Creates aspiration and positions the product as an enabler of success."""

PRODUCT_DESCRIPTION_BLOCK = """Introducing {product} - the professional solution designed to revolutionize the way you work.

Built specifically for discerning professionals who demand excellence, {product} combines powerful features with intuitive design. Our platform streamlines your workflow, saves valuable time, and delivers results that exceed expectations.

**Key Features:**
• Advanced automation capabilities
• Seamless integration with existing tools
• Enterprise-grade security
• 24/7 customer support

**Why Choose {product}?**
Join thousands of satisfied customers who have already transformed their business operations. With {product}, you're not just buying a product - you're investing in your success.

Ready to get started? Try {product} free for 14 days, no credit card required."""

EMAIL_BLOCK = """**Subject Line:** Discover how {product} can transform your workflow

Hi there,

Are you tired of juggling multiple tools and wasting time on repetitive tasks?

{product} was created specifically to solve these challenges. Our platform brings everything you need into one powerful, easy-to-use solution.

Here's what you'll get:
✓ Streamlined workflows that save hours every week
✓ Powerful automation that works in the background
✓ Intuitive interface that requires no training
✓ Results you can measure from day one

Over 10,000 professionals have already made the switch. Here's what they're saying:

"{product} has completely transformed how we work. We're more efficient and our team is happier." - Sarah M., Operations Director

**Special Offer:** Start your free 14-day trial today and see the difference for yourself.

[Get Started Now]

Best regards,
The {product} Team"""

SOCIAL_MEDIA_BLOCK = """**LinkedIn Version:**
Tired of inefficient workflows? {product} streamlines your operations and saves you hours every week. Join 10,000+ professionals who've already made the switch. Try free for 14 days → [link]

**Twitter Version:**
Say goodbye to workflow chaos! 🚀 {product} brings everything you need into one powerful platform. Start your free trial today → [link] #productivity #automation

**Instagram Version:**
✨ Work smarter, not harder ✨

{product} helps professionals like you:
⚡ Save time on repetitive tasks
📊 Get better results
🎯 Stay focused on what matters

Link in bio to start your free trial!"""

AD_COPY_BLOCK = """**Headline:** Transform Your Workflow in 14 Days

**Body:**
{product} is the all-in-one solution that helps professionals work smarter, not harder. Automate repetitive tasks, streamline operations, and achieve better results - all from one intuitive platform.

Trusted by 10,000+ professionals worldwide.

**Call to Action:**
Start Your Free Trial Today - No Credit Card Required"""

BLOG_INTRO_BLOCK = """In today's fast-paced business environment, efficiency isn't just a luxury - it's a necessity. Yet, countless professionals find themselves drowning in repetitive tasks, juggling multiple tools, and struggling to maintain productivity.

What if there was a better way?

Enter {product}, a revolutionary solution that's transforming how professionals approach their daily work. But before we dive into the specifics, let's talk about why traditional approaches to workflow management are falling short and what makes a truly effective solution.

In this comprehensive guide, we'll explore how {product} is helping thousands of professionals reclaim their time, streamline their operations, and achieve results they never thought possible. Whether you're a solo entrepreneur or part of a large organization, the insights shared here will change the way you think about productivity.

Let's get started."""

SALES_LETTER_BLOCK = """Dear Professional,

**PROBLEM:** You're working harder than ever, but feeling like you're falling behind.

Every day brings another pile of repetitive tasks. Another hour lost switching between tools. Another missed opportunity because you couldn't move fast enough.

Sound familiar?

**AGITATION:** You've tried other solutions. Downloaded the apps, watched the tutorials, promised yourself things would change. But nothing really solved the underlying problem. You're still overwhelmed, still stressed, still looking for a way out.

**SOLUTION:** That's why we created {product}.

{product} isn't just another productivity tool - it's a complete transformation of how you work. We've taken everything you need and combined it into one powerful, intuitive platform that actually delivers on its promises.

**Here's what makes {product} different:**

✓ It works WITH your existing workflow, not against it
✓ Setup takes minutes, not days
✓ Results are visible from day one
✓ No technical expertise required

**The Results Speak for Themselves:**

Our customers report an average of 10 hours saved per week. That's an entire workday back in your pocket. Time you can spend on what really matters - growing your business, serving your customers, or simply enjoying life outside of work.

**Risk-Free Guarantee:**

Try {product} free for 14 days. If you don't see immediate improvements in your workflow, simply cancel - no questions asked.

**Your Next Step:**

The choice is yours. You can continue struggling with the status quo, or you can take action today and join the thousands of professionals who've already transformed their work with {product}.

[Start Your Free Trial Now]

To your success,
The {product} Team

P.S. Remember, you have nothing to lose with our 14-day free trial. But every day you wait is another day of lost productivity. Take action now."""

TAGLINE_BLOCK = """**Option 1:** {product} - Work Smarter, Achieve More
Simple, aspirational, and focused on results.

**Option 2:** Where Productivity Meets Simplicity
Emphasizes the dual benefits of power and ease of use.

**Option 3:** {product} - Your Success, Simplified
Personal and benefit-focused, positioning the product as an enabler.

**Option 4:** Transform Work, Transform Results
Action-oriented and emphasizes tangible outcomes.

**Option 5:** {product} - The Smarter Way to Work
Positions the product as an intelligent, modern solution."""

DEFAULT_BLOCK = """{product} represents the future of professional excellence. Our innovative solution combines cutting-edge technology with user-friendly design to deliver exceptional results.

With {product}, you'll experience unprecedented efficiency, seamless workflow integration, and measurable improvements in productivity. Join thousands of satisfied customers who have already discovered the difference.

Ready to transform your work? Get started with {product} today."""

# First match wins, checked against the instruction text only (see
# instruction_text). "ad copy" precedes "headline" for prompts that have no
# product sentence and ask for both.
FALLBACK_BLOCKS: List[Tuple[str, str]] = [
    ("ad copy", AD_COPY_BLOCK),
    ("headline", HEADLINE_BLOCK),
    ("product description", PRODUCT_DESCRIPTION_BLOCK),
    ("email", EMAIL_BLOCK),
    ("social media", SOCIAL_MEDIA_BLOCK),
    ("blog intro", BLOG_INTRO_BLOCK),
    ("sales letter", SALES_LETTER_BLOCK),
    ("tagline", TAGLINE_BLOCK),
]


def extract_product_name(prompt: str) -> str:
    """Return the product named in the prompt, or a generic stand-in."""
    match = _PRODUCT_PATTERN.search(prompt)
    return match.group(1) if match else DEFAULT_PRODUCT_NAME


def instruction_text(prompt: str) -> str:
    """
    Return the template-owned opening of the prompt.

    Everything from the "for/about <product>." sentence on carries user
    input (product, audience, benefits, extra context), so keywords typed
    there must not pick the block. Prompts without a product sentence are
    used whole.
    """
    match = _PRODUCT_PATTERN.search(prompt)
    return prompt[: match.start()] if match else prompt


def select_fallback_block(prompt: str) -> Tuple[str, str]:
    """
    Pick the canned block for a prompt.

    Returns:
        Tuple of (matched keyword or "default", block template)
    """
    instruction = instruction_text(prompt)
    for keyword, block in FALLBACK_BLOCKS:
        if keyword in instruction:
            return keyword, block
    return "default", DEFAULT_BLOCK


def generate_fallback_copy(prompt: str) -> str:
    """
    Generate deterministic copy for a prompt without calling the LLM.

    Args:
        prompt: The prompt that would have been sent to the LLM

    Returns:
        Canned copy with the product name substituted into every placeholder
    """
    product = extract_product_name(prompt)
    keyword, block = select_fallback_block(prompt)
    copy_text = block.replace(PRODUCT_PLACEHOLDER, product)

    logger.info(
        f"[FALLBACK] ✓ Generated fallback copy: block={keyword}, "
        f"product={product!r}, {len(copy_text)} chars"
    )
    return copy_text
