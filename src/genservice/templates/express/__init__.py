"""Express + TypeScript service template.

Each render function returns the full text of one generated file. The
only substituted values are the listening port and the Docker base image;
the project name never appears in file content.
"""

from genservice.core.config import DEFAULT_NODE_IMAGE, DEFAULT_PORT


# =============================================================================
# Compiler configuration
# =============================================================================

def render_tsconfig() -> str:
    """tsconfig.json (JSON with comments, as tsc accepts)."""
    return """{
  "compilerOptions": {
    /* Base Options */
    "target": "ES2022",
    "module": "NodeNext",
    "esModuleInterop": true,
    "skipLibCheck": true,
    "allowJs": true,
    "resolveJsonModule": true,
    "moduleDetection": "force",
    "isolatedModules": true,
    "verbatimModuleSyntax": true,

    /* Strictness */
    "strict": true,
    "noUncheckedIndexedAccess": true,
    "noImplicitOverride": true,

    /* Output Options */
    "outDir": "dist",
    "sourceMap": true,

    /* Library Options */
    "lib": ["ES2022"],

    /* Declaration Files */
    "declaration": true,
    "declarationMap": true,
    "composite": true
  },
  "include": ["src"],
  "exclude": ["node_modules", "dist"]
}
"""


# =============================================================================
# Container image
# =============================================================================

def render_dockerfile(port: int = DEFAULT_PORT, node_image: str = DEFAULT_NODE_IMAGE) -> str:
    """Dockerfile building and running the compiled service.

    Dev dependencies are installed for the build step (tsc lives there)
    and pruned before the image is finalized.
    """
    return f"""# Use the official Node.js image.
FROM {node_image}

# Create and change to the app directory.
WORKDIR /usr/src

# Copy package.json and package-lock.json.
COPY package*.json ./

# Install dependencies, including the TypeScript toolchain.
RUN npm ci

# Copy the rest of the application code.
COPY . .

# Expose the port the app runs on.
EXPOSE {port}

# Build the TypeScript code.
RUN npm run build

# Drop development dependencies from the final image.
RUN npm prune --omit=dev

# Start the application.
CMD ["node", "dist/index.js"]
"""


def render_dockerignore() -> str:
    return """node_modules
dist
.env
.git
"""


# =============================================================================
# Application source
# =============================================================================

def render_index(port: int = DEFAULT_PORT) -> str:
    """src/index.ts with the root and /uuid demo routes."""
    return f"""import 'dotenv/config';
import express from 'express';
import {{ v4 as uuidv4 }} from 'uuid';

const app = express();
const port = process.env.PORT || {port};

app.get('/', (_req, res) => {{
  res.send('Hello, Cloud Run!');
}});

app.get('/uuid', (_req, res) => {{
  res.send(uuidv4());
}});

app.listen(port, () => {{
  console.log(`App listening on port ${{port}}`);
}});
"""


# =============================================================================
# Environment & VCS
# =============================================================================

def render_env(port: int = DEFAULT_PORT) -> str:
    return f"PORT={port}\n"


def render_gitignore() -> str:
    return """node_modules
dist
.env
"""
